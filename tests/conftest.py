import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parent.parent

# `main`, `data`, `src` and `tests.helpers` import from the repo root, installed or not.
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))
