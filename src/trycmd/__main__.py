"""Allow ``python -m trycmd``."""

from trycmd.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
