"""Entry point for `python -m pathstar`."""

from pathstar.cli import main

if __name__ == "__main__":
    main()
