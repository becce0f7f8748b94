from pathlib import Path

import pytest

from modules.hyprland.gamemode import GAMEMODE_MARKER, is_gamemode_on, toggle_gamemode
from modules.hyprland.ipc import ACTIVE_WALLPAPER_OPTION, HyprctlWallpaperStore, HyprlandIPC
from modules.hyprland.lock import build_lock_command


class FakeIPC:
    def __init__(self, options: dict | None = None, reply: str = 'ok'):
        self.options = options or {}
        self.reply = reply
        self.keywords: list[tuple[str, str]] = []

    def get_option(self, name: str):
        return self.options.get(name)

    def keyword(self, name: str, value: str) -> bool:
        self.keywords.append((name, value))
        return self.reply == 'ok'


def test_store_reads_active_wallpaper() -> None:
    ipc = FakeIPC({ACTIVE_WALLPAPER_OPTION: {'option': ACTIVE_WALLPAPER_OPTION, 'str': '/walls/a.jpg', 'set': True}})
    assert HyprctlWallpaperStore(ipc).get_active() == Path('/walls/a.jpg')


@pytest.mark.parametrize('option', [None, {'str': ''}, {'str': '[[EMPTY]]'}, {'int': 0}])
def test_store_unset_option(option) -> None:
    ipc = FakeIPC({ACTIVE_WALLPAPER_OPTION: option} if option is not None else {})
    assert HyprctlWallpaperStore(ipc).get_active() is None


def test_store_sets_keyword() -> None:
    ipc = FakeIPC()
    HyprctlWallpaperStore(ipc).set_active(Path('/walls/b.png'))
    assert ipc.keywords == [(ACTIVE_WALLPAPER_OPTION, '/walls/b.png')]


def test_store_set_rejected() -> None:
    with pytest.raises(RuntimeError):
        HyprctlWallpaperStore(FakeIPC(reply='error')).set_active(Path('/walls/b.png'))


def test_ipc_requires_signature(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv('HYPRLAND_INSTANCE_SIGNATURE', raising=False)
    with pytest.raises(RuntimeError):
        HyprlandIPC()


def test_ipc_socket_path(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv('XDG_RUNTIME_DIR', str(tmp_path))
    monkeypatch.setenv('HYPRLAND_INSTANCE_SIGNATURE', 'abc_123')
    assert HyprlandIPC().socket_path == tmp_path / 'hypr' / 'abc_123' / '.socket.sock'


def test_ipc_json_requests(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv('XDG_RUNTIME_DIR', str(tmp_path))
    ipc = HyprlandIPC(signature='sig')
    sent = []

    def fake_exchange(payload: str) -> str:
        sent.append(payload)
        if payload.startswith('j/'):
            return '{"option": "decoration:active_wallpaper", "str": "/w/a.jpg"}'
        return 'ok'

    monkeypatch.setattr(ipc, '_exchange', fake_exchange)
    assert ipc.get_option(ACTIVE_WALLPAPER_OPTION)['str'] == '/w/a.jpg'
    assert ipc.keyword(ACTIVE_WALLPAPER_OPTION, '/w/b.jpg')
    assert ipc.reload()
    assert sent == [
        'j/getoption decoration:active_wallpaper',
        'keyword decoration:active_wallpaper /w/b.jpg',
        'reload',
    ]


def test_ipc_request_errors_return_none(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv('XDG_RUNTIME_DIR', str(tmp_path))
    ipc = HyprlandIPC(signature='sig')

    def refused(payload: str) -> str:
        raise ConnectionRefusedError(payload)

    monkeypatch.setattr(ipc, '_exchange', refused)
    assert ipc.send_request('monitors') is None
    assert not ipc.keyword('general:gaps_in', '0')


def test_lock_command(tmp_path: Path) -> None:
    conf = tmp_path / 'hyprlock.conf'
    assert build_lock_command(conf, Path('/w/a.jpg')) == ['hyprlock', '-c', str(conf), '-b', '/w/a.jpg']
    assert build_lock_command(conf, None) == ['hyprlock', '-c', str(conf)]


def test_gamemode_toggles(tmp_path: Path) -> None:
    conf = tmp_path / 'hyprland.conf'
    conf.write_text('general {\n}\n')
    reloads = []

    def reload() -> bool:
        reloads.append(True)
        return True

    assert toggle_gamemode(conf, reload) is True
    assert is_gamemode_on(conf)
    assert conf.read_text() == f'general {{\n}}\n{GAMEMODE_MARKER}\n'

    assert toggle_gamemode(conf, reload) is False
    assert not is_gamemode_on(conf)
    assert conf.read_text() == 'general {\n}\n'
    assert len(reloads) == 2


def test_gamemode_missing_config(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        toggle_gamemode(tmp_path / 'hyprland.conf', lambda: True)
