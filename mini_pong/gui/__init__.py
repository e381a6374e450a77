"""
PyGame front-end of Mini Pong
"""
