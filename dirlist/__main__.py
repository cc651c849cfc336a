"""Module entrypoint for ``python -m dirlist``.

All argument parsing and listing setup happen in ``dirlist.cli``.
"""

import sys

from .cli import main


if __name__ == "__main__":
    sys.exit(main())
