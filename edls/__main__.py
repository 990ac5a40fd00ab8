"""Module entrypoint for ``python -m edls``.

This keeps module-mode execution behavior identical to the CLI script.
All argument parsing and pipeline setup happen in ``edls.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
