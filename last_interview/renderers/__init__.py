"""Renderers for interview output"""
from last_interview.renderers.base import BaseRenderer
from last_interview.renderers.factory import create_renderer
from last_interview.renderers.null import NoRenderer
from last_interview.renderers.terminal import RichRenderer

__all__ = ['BaseRenderer', 'NoRenderer', 'RichRenderer', 'create_renderer']
