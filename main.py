"""Device Control - main entry point.

Run this file to start the app:
    python main.py

Or run as a module:
    python -m device_control
"""

import sys
from pathlib import Path

# Make the src layout importable without installing
src_path = Path(__file__).parent / "src"
sys.path.insert(0, str(src_path))

from device_control.app import main

if __name__ == "__main__":
    sys.exit(main())
