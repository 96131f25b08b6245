# tests/conftest.py
# Repo root on sys.path so flat imports (`from services...`, `import state`) resolve under pytest.
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))
