"""Akkuea curation service: resource moderation + resource API."""

__version__ = "1.0.0"
