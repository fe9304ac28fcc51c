"""Agent Catalog - approved agent listing and submission service backed by a JSON file."""

__version__ = "1.0.0"
