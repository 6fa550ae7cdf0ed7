"""Module entrypoint for ``python -m pykilo``.

All argument parsing and startup ordering happen in ``pykilo.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
