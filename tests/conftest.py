# pathgraph/tests/conftest.py
import logging
import os
import sys

import pytest

# Add the project root (the parent of tests/) to sys.path so `import pathgraph` works without installing
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)


@pytest.fixture
def restore_logging():
    """Restore root and pathgraph logger state after a test reconfigures logging."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pg = logging.getLogger("pathgraph")
    pg_handlers = pg.handlers[:]
    pg_level = pg.level
    pg_propagate = pg.propagate
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    pg.handlers = pg_handlers
    pg.setLevel(pg_level)
    pg.propagate = pg_propagate
