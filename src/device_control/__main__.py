"""Entry point for running as a module: python -m device_control"""

import sys

from .app import main

if __name__ == "__main__":
    sys.exit(main())
