"""Module entrypoint for ``python -m mdbook_metadata``."""

from mdbook_metadata.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
