#!/usr/bin/env python3
"""AI module main entry point - inspect and change the sidebar selection."""

import json
import logging
import sys
from pathlib import Path

from helpers import ScriptConfig, create_module_parser
from .state import BACKENDS, load_state, save_state, select_backend, select_model

STATE_ARGUMENT = (["--state"], {"type": Path, "default": None, "help": "State file (default: ~/.config/ai/sidebar_state.json)"})


def create_parser():
    return create_module_parser(
        "ai",
        "AI sidebar backend/model selection",
        {
            "show": {"help": "Print the current selection", "arguments": [STATE_ARGUMENT]},
            "backend": {
                "help": "Select the backend",
                "arguments": [(["name"], {"choices": BACKENDS, "help": "Backend name"}), STATE_ARGUMENT],
            },
            "model": {
                "help": "Select the model (used by the Ollama backend)",
                "arguments": [
                    (["name"], {"help": "Model name"}),
                    (["--models"], {"nargs": "+", "default": None, "help": "Available models, for the index"}),
                    STATE_ARGUMENT,
                ],
            },
        },
    )


def main(argv: list[str] | None = None) -> int:
    args = create_parser().parse_args(argv)

    config = ScriptConfig("ai", "sidebar-state")
    config.setup_logging(
        level=logging.DEBUG if args.verbose else logging.INFO,
        include_console=args.verbose,
    )

    state = load_state(args.state)
    try:
        if args.command == "backend":
            state = select_backend(state, args.name)
            save_state(state, args.state)
        elif args.command == "model":
            state = select_model(state, args.name, args.models)
            save_state(state, args.state)
    except (ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(json.dumps(state.to_json(), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
