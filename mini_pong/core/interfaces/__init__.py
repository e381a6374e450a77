"""
Protocols of the collaborators driven by the game loop
"""

from mini_pong.core.interfaces.clock import ClockProtocol
from mini_pong.core.interfaces.renderer import RendererProtocol

__all__ = ["ClockProtocol", "RendererProtocol"]
