"""Entry point for `python -m claude_statusline`."""

import sys


def main():
    from claude_statusline.app import run
    # Emoji segments must not depend on the terminal locale
    sys.stdout.reconfigure(encoding="utf-8")
    sys.exit(run())


if __name__ == "__main__":
    main()
