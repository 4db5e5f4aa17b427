"""Entry point: python -m tasklist"""

import sys

from tasklist.cli import main

if __name__ == "__main__":
    sys.exit(main())
