"""
Root conftest - shared pytest configuration.
Ensures the storefront package is importable when running pytest from the
repository root, and gives the app a test configuration before it is imported.
"""
import os
import sys
from pathlib import Path

# Ensure repository root is in path for 'from storefront...' imports
_root = Path(__file__).resolve().parent
if str(_root) not in sys.path:
    sys.path.insert(0, str(_root))

# Must be set before storefront.core.config.get_settings() is first called
os.environ.setdefault("JWT_SECRET_KEY", "test_secret_key_for_testing_only")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("MONGO_ENSURE_INDEXES", "false")
os.environ.setdefault("MONGO_DB_NAME", "storefront_test")
