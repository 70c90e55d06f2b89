"""Small command-line tools and library routines for text, numbers, images and HTML."""

__version__ = "0.1.0"