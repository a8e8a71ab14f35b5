"""Null renderer that does nothing - used for simulations and when no rendering is needed"""
from last_interview.renderers.base import BaseRenderer
from last_interview.schemas.content import Question


class NoRenderer(BaseRenderer):
    """Null renderer implementation that does nothing"""

    def render_question(self, question: Question) -> None:
        pass
