"""2D game pieces and toy physics: collisions, orbits, tile maps, pong, snake and a playable snake game."""

__version__ = "0.1.0"