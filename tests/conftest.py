"""
Shared fixtures for wakachi tests.
"""

import json

import pytest

from wakachi.context import SegmenterContext, clear_context
from wakachi.settings import DEFAULT_DICT_PATH


@pytest.fixture
def example_context():
    """Two-morph dictionary: 今日/noun, は/particle, noun->particle 0.5."""
    return SegmenterContext.build(
        [("今日", "noun"), ("は", "particle")],
        transitions={"noun": {"particle": 0.5}},
    )


@pytest.fixture
def verb_context():
    """Dictionary with a verb stem and a suffix that recombine."""
    return SegmenterContext.build(
        [
            ("雨", "noun"), ("が", "particle"),
            ("降", "verb"), ("っている", "suffix"), ("ている", "suffix"),
        ],
        transitions={
            "noun": {"particle": 0.6},
            "particle": {"verb": 0.3},
            "verb": {"suffix": 0.9},
        },
        recombination={"verb": ["suffix"]},
    )


@pytest.fixture(scope="session")
def sample_dictionary_data():
    """Decoded bundled sample dictionary."""
    with open(DEFAULT_DICT_PATH, encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def dictionary_file(tmp_path):
    """Factory writing a dictionary document to a temp file."""
    def _write(data, name="dict.json"):
        path = tmp_path / name
        path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
        return path
    return _write


@pytest.fixture(autouse=True)
def reset_active_context():
    """Each test starts and ends without an active context."""
    clear_context()
    yield
    clear_context()
