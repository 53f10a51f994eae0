"""Module entrypoint for ``python -m quitprompt``.

All argument parsing and runtime setup happen in ``quitprompt.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
