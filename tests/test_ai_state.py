import json
from pathlib import Path

import pytest

from modules.ai.main import main
from modules.ai.state import SidebarState, load_state, save_state, select_backend, select_model


def test_missing_state_gives_defaults(tmp_path: Path) -> None:
    assert load_state(tmp_path / 'sidebar_state.json') == SidebarState('ChatGPT', 0, '', 0)


def test_invalid_state_gives_defaults(tmp_path: Path) -> None:
    path = tmp_path / 'sidebar_state.json'
    path.write_text('{not json')
    assert load_state(path) == SidebarState()
    path.write_text('[1, 2]')
    assert load_state(path) == SidebarState()


def test_state_written_in_sidebar_format(tmp_path: Path) -> None:
    path = tmp_path / 'ai' / 'sidebar_state.json'
    state = select_model(select_backend(SidebarState(), 'Ollama'), 'llama3', ['mistral', 'llama3'])
    save_state(state, path)

    assert json.loads(path.read_text()) == {
        'backend': 'Ollama',
        'backendIndex': 3,
        'model': 'llama3',
        'modelIndex': 1,
    }
    assert load_state(path) == state


def test_selection_errors() -> None:
    with pytest.raises(ValueError):
        select_backend(SidebarState(), 'Clippy')
    with pytest.raises(ValueError):
        select_model(SidebarState(), 'llama3', ['mistral'])
    assert select_model(SidebarState(), 'llama3').model_index == 0


def test_cli_backend(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / 'sidebar_state.json'
    assert main(['backend', 'Google Gemini', '--state', str(path)]) == 0
    assert json.loads(capsys.readouterr().out)['backendIndex'] == 1
    assert load_state(path).backend == 'Google Gemini'
