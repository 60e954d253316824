import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import kwparser
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())


ENV_VARS = ("KWP_POSITIVE_PREFIX", "KWP_NEGATIVE_PREFIX", "KWP_RETAIN_PREFIX")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep prefix environment variables out of every test."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def sample_products():
    """Return the product list used across matcher tests."""
    return ["Youth Tee", "Blue Tee - Youth", "Blurple Hoodie", "Wumpus Hat"]
