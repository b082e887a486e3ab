"""Turtle graphics to SVG, a drawing-command interpreter and small teaching data structures."""

__version__ = "0.1.0"