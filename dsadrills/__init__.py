"""Classic array, linked-list and string interview problems, with a small command line."""

__version__ = "0.1.0"