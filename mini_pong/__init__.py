"""
Mini Pong: a deterministic two-paddle ball game simulation
"""

__version__ = "0.1.0"
