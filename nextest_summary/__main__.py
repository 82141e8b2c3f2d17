import sys

from nextest_summary.cli.controller import main

if __name__ == "__main__":
    sys.exit(main())
