from __future__ import annotations
import sys
from pyrte.app import run_app


def main() -> int:
    """Module entrypoint for `python -m pyrte.main` and the `pyrte` console script."""
    return run_app(sys.argv)


if __name__ == "__main__":
    raise SystemExit(main())
