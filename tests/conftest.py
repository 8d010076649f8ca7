import os
import sys
from pathlib import Path

import pytest

# Add src to sys.path so we can import table_text
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

# Widgets and timers need a platform plugin even without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


# Common test fixtures
@pytest.fixture
def math_value() -> str:
    """Conversation JSON with math in the first row only."""
    return r'[["What is \\(2+2\\)?", "Four"], ["Plain question", "Plain answer"]]'


@pytest.fixture
def plain_value() -> str:
    """Conversation JSON without any math."""
    return '[["Hello", "Hi"], ["How are you?", "Fine"]]'
