"""Rezvan CLI entry point.

Allows running via `python -m rezvan` and provides the console script
defined in `pyproject.toml`.
"""

from __future__ import annotations

import sys

from .version import get_version_string


def _escape_bytes(s: str) -> str:
    """Return a printable representation of raw key string."""
    return s.encode('unicode_escape').decode('ascii')


def run_keyboard_test() -> None:
    """Print parsed key events until ESC is pressed."""
    from .terminal import TerminalInterface
    from .keyboard import KeyboardHandler, KeyType

    print("Keyboard test mode - press keys to see parsed events.")
    print("Quit with ESC.")

    term = TerminalInterface()
    term.setup()
    kb = KeyboardHandler(term)
    try:
        while True:
            ev = kb.read_key()
            if ev.key_type == KeyType.SPECIAL and ev.value == 'escape':
                print("Exiting keyboard test.")
                break
            print(f"type={ev.key_type.value} value={_escape_bytes(ev.value)} "
                  f"raw='{_escape_bytes(ev.raw)}'")
    except EOFError:
        pass
    finally:
        term.cleanup()


def main(argv: list[str] | None = None) -> int:
    # Very small arg parsing: version, keyboard test mode, optional filename
    args = sys.argv[1:] if argv is None else argv
    if args and args[0] in ("--version", "-V"):
        print(get_version_string())
        return 0
    if args and args[0] in ("--keytest", "--keyboard-test"):
        run_keyboard_test()
        return 0

    # Lazy import to avoid importing UI deps for --version
    from .config import load_config, setup_logging
    from .editor import Editor

    config = load_config()
    setup_logging(config)
    editor = Editor(config=config)
    if args:
        try:
            editor.load_file(args[0])
        except OSError as e:
            print(f"Error loading file: {e}", file=sys.stderr)
            return 1
    try:
        editor.run()
    except RuntimeError as e:
        print(f"rezvan: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
