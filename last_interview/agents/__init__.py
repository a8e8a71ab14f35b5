"""Interview players"""
from last_interview.agents.base import InterviewPlayer
from last_interview.agents.human_player import HumanPlayer
from last_interview.agents.random_agent import ArchetypePlayer, RandomPlayer
from last_interview.agents.player_factory import create_player

__all__ = ['InterviewPlayer', 'HumanPlayer', 'RandomPlayer', 'ArchetypePlayer', 'create_player']
