"""Module entrypoint for ``python -m todogist``."""

from todogist.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
