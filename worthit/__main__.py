"""Entry point for `python -m worthit`."""

from worthit.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
