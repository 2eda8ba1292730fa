# tests/conftest.py
import sys
from pathlib import Path

import pytest

# Add project root to sys.path so "sudoku_engine" and "apps" can be imported in tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

CLASSIC = "004700061500002080000008300040800506000609000806001090008500000050100009610007400"


def pattern_rows(dim):
    """A solved grid built by shifting 1..dim along each row."""
    group = dim // 3
    return [[((r % group) * 3 + r // group + c) % dim + 1 for c in range(dim)] for r in range(dim)]


@pytest.fixture
def classic_text():
    return CLASSIC


@pytest.fixture
def solved9():
    from sudoku_engine import GridFormat

    return GridFormat(9).from_rows(pattern_rows(9))


@pytest.fixture
def pattern():
    return pattern_rows
