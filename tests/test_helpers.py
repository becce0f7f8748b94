import sys
from pathlib import Path

import pytest

from helpers import ScriptConfig, build_script_command, list_modules, write_text_atomic
from modules.main import get_modules_directory


def test_script_config_dirs(xdg_home: Path) -> None:
    config = ScriptConfig('wallpaper', 'rotate')
    assert config.config_dir == xdg_home / '.config' / 'hypr-quickshell' / 'wallpaper'
    assert config.state_dir == xdg_home / '.local' / 'state' / 'hypr-quickshell' / 'wallpaper'
    assert config.config_dir.is_dir()
    assert config.log_file.name == 'rotate.log'


def test_module_config_overrides_suite(xdg_home: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    suite_dir = xdg_home / '.config' / 'hypr-quickshell'
    (suite_dir / 'wallpaper').mkdir(parents=True)
    (suite_dir / 'config.toml').write_text('wallpaper_dir = "/suite"\nmatugen_mode = "light"\n')
    (suite_dir / 'wallpaper' / 'rotate.toml').write_text('wallpaper_dir = "~/walls"\n')
    monkeypatch.setenv('HOME', '/home/tester')

    config = ScriptConfig('wallpaper', 'rotate', defaults={'screenshot_dir': '/shots'})
    assert config.get_config_path_value('wallpaper_dir', '/default') == Path('/home/tester/walls')
    assert config.get_config_value('matugen_mode') == 'light'
    assert config.get_config_value('screenshot_dir') == '/shots'
    assert config.get_config_value('missing', 7) == 7


def test_checked_config_values(xdg_home: Path) -> None:
    config = ScriptConfig('theme', 'propagate', load_config=False, defaults={'empty': ' ', 'n': 3, 'l': [1]})
    assert config.get_config_value_checked('n', require_str=True) == '3'
    with pytest.raises(ValueError):
        config.get_config_value_checked('empty', require_str=True)
    with pytest.raises(ValueError):
        config.get_config_value_checked('l', require_str=True)
    with pytest.raises(ValueError):
        config.get_config_value_checked('missing', require_str=True)


def test_write_text_atomic(tmp_path: Path) -> None:
    path = tmp_path / 'a' / 'b' / 'file.conf'
    write_text_atomic(path, 'one\n')
    write_text_atomic(path, 'two\n')
    assert path.read_text() == 'two\n'
    assert oct(path.stat().st_mode & 0o777) == oct(0o644)
    assert [p.name for p in path.parent.iterdir()] == ['file.conf']


def test_list_modules() -> None:
    assert list_modules(get_modules_directory()) == ['ai', 'desktop', 'hyprland', 'quickshell', 'theme', 'wallpaper']


def test_build_script_command() -> None:
    module_dir = get_modules_directory() / 'wallpaper'
    cmd, env = build_script_command(module_dir, 'main.py', ['next'])
    assert cmd == [sys.executable, '-m', 'modules.wallpaper.main', 'next']
    assert env is None

    with pytest.raises(FileNotFoundError):
        build_script_command(module_dir, 'missing.py')
