# main.py

import sys

from tictactoe_engine.cli import main


if __name__ == "__main__":
    sys.exit(main())
