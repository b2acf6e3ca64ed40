"""`python -m main` desde `src/`: mismo comando que el script `admin-editor`."""

from __future__ import annotations

import sys

# Las etiquetas en español (widgets, tablas Rich) necesitan utf-8 en consolas cp1252.
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")

from cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
