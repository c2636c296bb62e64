"""Runs the notion-client smoke-test CLI from a source checkout.

Usage without installing the package:
- `python -m main get-page <page_id>`

The importable packages (`adapters`, `cli`, `core`) live under `src/`, so this
script adds that directory to `sys.path` before importing the Typer app.
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
