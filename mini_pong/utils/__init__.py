"""
Utility module of Mini Pong game
"""

from mini_pong.utils.config import GameConfig
from mini_pong.utils.config import game_config
from mini_pong.utils.config import game_config_tmp
from mini_pong.utils.config import load_config_from_file

__all__ = ["game_config", "game_config_tmp", "load_config_from_file", "GameConfig"]
