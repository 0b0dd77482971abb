"""A small fixed-shooter arcade game: world, keyboard, ships, stage and game loop."""

__version__ = "0.1.0"
__all__ = ["__version__"]