import os
import sys

# Repo root on sys.path so 'src.*', 'apps.*' and 'services.*' import without install
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)
