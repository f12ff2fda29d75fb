# Debian-DevEnv-Setup/install.py

import sys
from pathlib import Path

# Ensure the script's directory is in the Python path
sys.path.insert(0, str(Path(__file__).parent))

from devenv_setup.main import main

if __name__ == "__main__":
    sys.exit(main())
