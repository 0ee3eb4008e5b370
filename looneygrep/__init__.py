"""Search files, directories or web pages for a string, with highlighting and interactive replace."""

__version__ = "0.1.0"