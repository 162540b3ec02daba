"""clipfrag: copy a text document to the clipboard in line-aligned fragments."""

__version__ = "0.1.0"
