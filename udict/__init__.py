"""udict - look up words on Urban Dictionary from the terminal."""

__version__ = "0.1.0"
