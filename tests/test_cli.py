from pathlib import Path

import pytest

from modules.theme import main as theme_main
from modules.wallpaper import main as wallpaper_main


def test_wallpaper_list(wallpaper_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert wallpaper_main.main(['list', '--dir', str(wallpaper_dir)]) == 0
    assert capsys.readouterr().out.splitlines() == [str(wallpaper_dir / n) for n in ('a.jpg', 'b.jpg', 'c.jpg')]


def test_wallpaper_rotate_outside_hyprland(
    wallpaper_dir: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.delenv('HYPRLAND_INSTANCE_SIGNATURE', raising=False)
    assert wallpaper_main.main(['next', '--dir', str(wallpaper_dir)]) == 1
    assert 'HYPRLAND_INSTANCE_SIGNATURE' in capsys.readouterr().err


def test_wallpaper_rejects_unknown_direction() -> None:
    with pytest.raises(SystemExit):
        wallpaper_main.main(['sideways'])


def test_theme_hook_requires_image(capsys: pytest.CaptureFixture[str]) -> None:
    assert theme_main.main(['onWallpaperChanged']) == 1
    assert 'requires wallpaper path' in capsys.readouterr().err


def test_theme_missing_image(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert theme_main.main(['apply', str(tmp_path / 'missing.png')]) == 1
    assert 'not found' in capsys.readouterr().err


def test_wallpaper_list_prints_absolute_paths(
    wallpaper_dir: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.chdir(wallpaper_dir.parent)
    assert wallpaper_main.main(['list', '--dir', wallpaper_dir.name]) == 0
    assert capsys.readouterr().out.splitlines()[0] == str(wallpaper_dir / 'a.jpg')
