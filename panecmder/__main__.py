"""Module entrypoint for ``python -m panecmder``."""

from .cli import main


if __name__ == "__main__":
    main()
