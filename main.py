import sys

from tictactoe.console import main

# -----------------------------------------------------------------------------
# ENTRY POINT
# -----------------------------------------------------------------------------

if __name__ == '__main__':
    sys.exit(main())
