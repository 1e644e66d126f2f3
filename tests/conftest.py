"""
Shared fixtures: a scripted entropy source and a tiny word corpus.
"""

import sys
from pathlib import Path

import pytest

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from motus.core.entropy import EntropySource
from motus.core.wordlist import WordCorpus


class ScriptedEntropy(EntropySource):
    """Entropy source replaying a fixed list of draws."""

    name = "scripted"

    def __init__(self, draws):
        self._draws = list(draws)
        self.requests = []

    @property
    def remaining(self):
        return len(self._draws)

    def _uniform(self, n):
        self.requests.append(n)
        if not self._draws:
            raise AssertionError(f"Unexpected draw from [0, {n})")
        value = self._draws.pop(0)
        assert 0 <= value < n, f"Scripted draw {value} outside [0, {n})"
        return value


@pytest.fixture
def scripted():
    """Factory building a ScriptedEntropy from a list of draws."""
    return ScriptedEntropy


@pytest.fixture
def nato_corpus():
    """Four-word corpus used by the end-to-end scenarios."""
    return WordCorpus(["alpha", "bravo", "charlie", "delta"])


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep tests away from the user's ~/.motus/config.json."""
    path = tmp_path / "motus-config.json"
    monkeypatch.setenv("MOTUS_CONFIG", str(path))
    return path
