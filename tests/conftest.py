import os
import sys
from pathlib import Path

import pytest

# Keep the repository free of Python bytecode and __pycache__ artifacts during tests.
sys.dont_write_bytecode = True

TESTS_ROOT = Path(__file__).resolve().parent
REPO_ROOT = TESTS_ROOT.parent
SRC_ROOT = REPO_ROOT / "src"

# Make src/ importable as 'archdsl'
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))


from archdsl.core.audit import reset_stdlib_logging_for_tests
from archdsl.core.config import clear_all_caches


@pytest.fixture(autouse=True)
def _isolate_archdsl(tmp_path, monkeypatch):
    """Run every test from an empty project with no ARCHDSL_* overrides and fresh caches."""
    for key in list(os.environ):
        if key.startswith("ARCHDSL_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    clear_all_caches()
    yield
    clear_all_caches()
    reset_stdlib_logging_for_tests()


@pytest.fixture
def dsl_tree(tmp_path):
    """Factory writing ``{relative_path: content}`` under tmp_path/workspace."""
    root = tmp_path / "workspace"

    def _make(files):
        for rel, content in files.items():
            path = root / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        return root

    return _make
