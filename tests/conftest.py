from pathlib import Path

import pytest
from xdg import BaseDirectory

from fakes import FakePropagator, FakeStore
from modules.theme.palette import Palette


@pytest.fixture(autouse=True)
def xdg_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the XDG config/state homes into the test's tmp dir."""
    home = tmp_path / 'home'
    monkeypatch.setattr(BaseDirectory, 'xdg_config_home', str(home / '.config'))
    monkeypatch.setattr(BaseDirectory, 'xdg_state_home', str(home / '.local' / 'state'))
    return home


@pytest.fixture
def palette() -> Palette:
    return Palette(
        base='#101010',
        on_base='#e6e1e5',
        accent='#4477ff',
        surface='#1d1b20',
        on_surface='#cac4d0',
    )


@pytest.fixture
def wallpaper_dir(tmp_path: Path) -> Path:
    directory = tmp_path / 'wallpaper'
    directory.mkdir()
    for name in ('a.jpg', 'b.jpg', 'c.jpg'):
        (directory / name).write_bytes(b'\xff\xd8')
    return directory


@pytest.fixture
def store() -> FakeStore:
    return FakeStore()


@pytest.fixture
def propagator() -> FakePropagator:
    return FakePropagator()
