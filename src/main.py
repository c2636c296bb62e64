"""Entrypoint de la CLI `notion-client` (headers, get-page, query-database...).

Mismo `run()` que expone el console script declarado en `pyproject.toml`.
"""

from __future__ import annotations

import sys

# Rich prints non-ASCII page titles; Windows consoles default to cp1252.
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")

from cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
