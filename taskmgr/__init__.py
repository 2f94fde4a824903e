"""A small command-line task manager backed by JSON or CSV files."""

__version__ = "0.1.0"