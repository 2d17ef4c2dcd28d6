"""
Entry point for `python -m mag.export_anki_vocab`.
"""
from __future__ import annotations

from .run import main as _main


def main() -> None:
    raise SystemExit(_main())


if __name__ == "__main__":
    main()
