"""
Scenes package for Rally Pong, auto-discovered by the scene registry.
"""
