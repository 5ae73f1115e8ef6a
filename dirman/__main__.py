"""Module entrypoint for ``python -m dirman``.

All argument parsing and runtime setup happen in ``dirman.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
