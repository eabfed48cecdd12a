"""
Pytest configuration and fixtures.

Shared option lists and dialogs used across the builder tests.
"""

import pytest


@pytest.fixture
def options():
    return [{"text": "A", "value": "1"}, {"text": "B", "value": "2"}]


@pytest.fixture
def numeric_options():
    return [{"text": "A", "value": 1}, {"text": "B", "value": 2}]


@pytest.fixture
def grouped_options():
    return [
        {"label": "Letters", "options": [{"text": "A", "value": "a"}, {"text": "B", "value": "b"}]},
        {"label": "Digits", "options": [{"text": "One", "value": "1"}]},
    ]


@pytest.fixture
def dialog():
    return {
        "title": "Sure?",
        "description": "This cannot be undone",
        "confirmText": "Yes",
        "cancelText": "No",
    }


@pytest.fixture
def confirm_payload():
    return {
        "title": {"type": "plain_text", "text": "Sure?"},
        "text": {"type": "plain_text", "text": "This cannot be undone"},
        "confirm": {"type": "plain_text", "text": "Yes"},
        "deny": {"type": "plain_text", "text": "No"},
    }
