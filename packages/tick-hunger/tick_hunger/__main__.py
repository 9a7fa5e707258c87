import sys

from tick_hunger.cli import main

if __name__ == "__main__":
    sys.exit(main())
