"""Entry point for the jscoerce Evaluator Server."""

import sys
from pathlib import Path

# Add the src directory to the Python path
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root / "src"))

from jscoerce.evaluator_server.server import main

if __name__ == "__main__":
    main()
