"""Module entrypoint for ``python -m reqnav``."""

from .cli import main


if __name__ == "__main__":
    main()
