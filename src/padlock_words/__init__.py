"""Find the dictionary words that can be dialled on a letter combination lock."""

__version__ = "1.0.0"
