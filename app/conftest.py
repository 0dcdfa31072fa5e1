# conftest.py
import os
import sys

# Repository root on PYTHONPATH so that 'import app...' works
sys.path.insert(0, str(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

# Test environment: in-memory SQLite through aiosqlite
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
