"""Entry point for running tickscale as a module.

Usage:
    python -m tickscale [options] START END
"""

from tickscale.cli import main


if __name__ == "__main__":
    main()
