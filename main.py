"""Lanzador de la CLI `admin-editor` desde un checkout sin instalar.

Uso:
- `python main.py preview Post --data post.json`

Añade `src/` al path para que `core`, `adapters` y `cli` (y los templates de
los widgets) se resuelvan igual que tras un `pip install -e .`.
"""

from __future__ import annotations

import sys
from pathlib import Path


def main() -> None:
    src = Path(__file__).resolve().parent / "src"
    if str(src) not in sys.path:
        sys.path.insert(0, str(src))

    from cli.main import run  # noqa: PLC0415

    run()


if __name__ == "__main__":
    main()
