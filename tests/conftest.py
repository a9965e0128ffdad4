"""
Pytest configuration and fixtures for card-autonumber tests

This module provides shared fixtures for unit and integration tests.
"""
from datetime import datetime

import pytest

from card_autonumber.numbering import NumberingEngine
from card_autonumber.observability import CollectingMessageSink


# =======================
# PYTEST CONFIGURATION
# =======================

def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line(
        "markers", "unit: Unit tests of a single component"
    )
    config.addinivalue_line(
        "markers", "integration: Tests that run the pipeline or the CLI end to end"
    )


# =======================
# CLOCK FIXTURES
# =======================

FIXED_NOW = datetime(2025, 6, 1, 14, 30, 12)


@pytest.fixture
def fixed_now() -> datetime:
    """Simulated wall-clock time: 2025-06-01 14:30"""
    return FIXED_NOW


@pytest.fixture
def engine(fixed_now) -> NumberingEngine:
    """Numbering engine whose clock is frozen at fixed_now"""
    return NumberingEngine(clock=lambda: fixed_now)


@pytest.fixture
def sink() -> CollectingMessageSink:
    """In-memory message sink"""
    return CollectingMessageSink()


# =======================
# DECK FIXTURES
# =======================

def make_card(identifier: str, q: str | None = "Question", a: str | None = "Answer", deck: str = "Default") -> str:
    """Render a #card(...) call in the deck file format"""
    lines = ["#card(", f'  id: "{identifier}",', f'  target-deck: "{deck}",']
    if q is not None:
        lines.append(f"  q: [{q}],")
    if a is not None:
        lines.append(f"  a: [{a}],")
    lines.append(")")
    return "\n".join(lines)


@pytest.fixture
def card_factory():
    """Factory rendering a single card as deck source"""
    return make_card


@pytest.fixture
def sample_deck() -> str:
    """Deck with one resolved card, two new cards and an empty card"""
    return "\n\n".join([
        '#import "@preview/typ2anki:0.1.0": *',
        "= Cell biology",
        make_card("2505201000", q="What is the powerhouse of the cell?", a="The mitochondria"),
        make_card("", q="What does the ribosome make?", a="Proteins"),
        make_card("250601", q="Where is DNA stored?", a="In the nucleus"),
        make_card("", q=" ", a=""),
        "// #card(id: \"\", q: [commented out], a: [x])",
    ]) + "\n"
