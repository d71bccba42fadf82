import sys
from pathlib import Path

# Add the project root and this directory to sys.path
project_root = Path(__file__).resolve().parents[1]
for p in (project_root, Path(__file__).resolve().parent):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))
