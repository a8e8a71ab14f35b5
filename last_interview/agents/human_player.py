"""Interactive console player"""
import logging
from typing import Sequence

from last_interview.agents.base import InterviewPlayer
from last_interview.schemas.content import Answer


class HumanPlayer(InterviewPlayer):
    """Interactive console player that takes input from user"""

    def __init__(self, skip_single: bool = False):
        super().__init__(skip_single=skip_single)
        self.logger = logging.getLogger(__name__)

    def _get_action_impl(self, observation: str, choices: Sequence[Answer]) -> int:
        while True:
            choice = input()
            if choice.strip().lower() == 'q':
                raise KeyboardInterrupt()

            try:
                choice_num = int(choice)
            except ValueError:
                print("Invalid input. Please enter a number.")
                continue

            if 1 <= choice_num <= len(choices):
                return choice_num
            print(f"Invalid choice. Please enter a number between 1 and {len(choices)}")
