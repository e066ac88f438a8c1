"""Predicates that match files by metadata (extension, name, path, directory, size, modification time) and by content (substring, regex)."""

__version__ = "0.1.4"