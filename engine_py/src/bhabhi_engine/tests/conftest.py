"""
Shared fixtures for the Bhabhi engine tests.
"""

import pytest

from bhabhi_engine.engine import BhabhiEngine
from bhabhi_engine.rules import create_rules
from bhabhi_engine.store import InMemoryGameStore


@pytest.fixture
def engine():
    return BhabhiEngine(store=InMemoryGameStore(), rules=create_rules(seed=42))
