"""Shared test fixtures"""
import pytest

from last_interview.constants import DEFAULT_CONTENT
from last_interview.core.content_registry import load_content
from last_interview.core.logging import LogManager
from last_interview.schemas.content import ContentModel
from last_interview.schemas.state import GameState


@pytest.fixture
def test_logger():
    """Get a test logger"""
    log_manager = LogManager("test")
    log_manager.setup("info")
    return log_manager.get_logger()


@pytest.fixture
def content_data():
    """Small but complete content as it would be read from YAML"""
    return {
        "title": "Test Interview",
        "questions": [
            {
                "id": "q1",
                "text": "Why do you want this job?",
                "answers": [
                    {"text": "Growth", "normal_points": 5, "type": "professional",
                     "reaction_text": "Good."},
                    {"text": "To burn it down", "chaos_points": 20, "type": "aggressive",
                     "reaction_text": "Noted.", "visual_consequence_text": "A pen snaps."},
                    {"text": "...", "normal_points": 2, "chaos_points": -2, "type": "zen"},
                ],
            },
            {
                "id": "q2",
                "text": "Where do you see yourself in five years?",
                "category": "personality",
                "answers": [
                    {"text": "Here", "normal_points": 5, "type": "professional"},
                    {"text": "In your chair", "chaos_points": 30, "type": "absurd_extreme"},
                ],
            },
            {
                "id": "q3",
                "type": "special",
                "text": "Is everything alright?",
                "unlock_conditions": [{"kind": "min_chaos_points", "value": 20}],
                "answers": [
                    {"text": "Never better", "chaos_points": 10, "type": "sociopathic"},
                ],
            },
        ],
        "endings": [
            {"id": "escorted_out", "title": "Escorted Out",
             "condition": {"min_total_points": 50}},
            {"id": "polite_no", "title": "Polite No"},
        ],
        "office": {
            "events": [{"id": "e1", "text": "The printer jams."}],
            "interruptions": [{"id": "i1", "text": "Phone rings.", "source": "phone call"}],
            "rumors": [{"id": "r1", "text": "They never hire anyone."}],
        },
    }


@pytest.fixture
def small_content(content_data):
    """Small content set as a validated ContentModel"""
    return ContentModel.model_validate(content_data)


@pytest.fixture
def default_content():
    """Bundled default content"""
    return load_content(DEFAULT_CONTENT)


@pytest.fixture
def state():
    """Fresh game state"""
    return GameState()
