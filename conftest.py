"""
Root conftest - shared pytest configuration and fixtures.
Ensures the users_api package is discoverable when running pytest from the project root.
"""
import sys
from pathlib import Path

# Ensure project root is in path for 'from users_api...' imports
_root = Path(__file__).resolve().parent
if str(_root) not in sys.path:
    sys.path.insert(0, str(_root))
