"""League of Legends skinset finder."""

__version__ = "0.1.0"
