import sys

from bibtex_lint.cli import main

if __name__ == "__main__":
    sys.exit(main())
