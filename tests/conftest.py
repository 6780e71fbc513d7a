import sys
from pathlib import Path
import importlib
import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


@pytest.fixture()
def m():
    """Lazily import the main module for tests to avoid module-level import."""
    return importlib.import_module("main")


SAMPLES = [
    "Hello world!",
    "abracadabra",
    "aaaa",
    "x",
    "ab",
    "The quick brown fox jumps over the lazy dog.\n\tTabs & newlines too.",
    "Привет, мир! 你好 ✓",
]


@pytest.fixture(params=SAMPLES, ids=lambda s: repr(s[:12]))
def sample_text(request):
    """Texts with at least one symbol, covering singleton and non-ASCII alphabets."""
    return request.param


@pytest.fixture()
def text_file(tmp_path: Path):
    """Write a small UTF-8 text file and return its path."""
    path = tmp_path / "input.txt"
    path.write_text("mississippi river\n", encoding="utf-8")
    return path
