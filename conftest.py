# conftest.py  (at repo root)
# Ensure the repository root is importable during pytest runs so `import armor`
# works without an editable install.
import sys, pathlib
ROOT = pathlib.Path(__file__).resolve().parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))
