"""HOI4 radio station mod generator."""

__version__ = "0.3.0"
