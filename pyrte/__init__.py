"""PyRichText: a minimal rich-text editor with a privileged file host."""

__version__ = "0.1.0"
