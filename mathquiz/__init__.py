"""A terminal math quiz with a leaderboard kept in a text file."""

__version__ = "0.1.0"
__all__ = ["__version__"]