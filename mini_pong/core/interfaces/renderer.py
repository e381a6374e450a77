"""
Renderer protocol - defines interface for different rendering backends
"""

from typing import Protocol

from mini_pong.core.entities import GameState


class RendererProtocol(Protocol):
    """
    Protocol for renderer implementations.

    Renderers are pure consumers of snapshots: they draw a state and never
    modify it. Enables multiple rendering backends: Pygame, headless, etc.
    """

    def render(self, state: GameState) -> None:
        """
        Render a single frame of the game.

        Args:
            state: Snapshot computed by the last tick
        """
        ...

    def is_active(self) -> bool:
        """Check if renderer is still active (window not closed)"""
        ...

    def cleanup(self) -> None:
        """Clean up renderer resources"""
        ...
