"""Module entrypoint for `python -m burnttoast`."""

from __future__ import annotations

from burnttoast.cli import main


if __name__ == "__main__":
    raise SystemExit(main())
