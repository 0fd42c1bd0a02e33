"""crossparser - scan a directory and summarize its files by type."""

__version__ = "0.1.0"
