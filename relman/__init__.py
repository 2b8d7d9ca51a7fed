"""Semantic-version release tagging and source archive packaging."""

__version__ = "0.1.0"
