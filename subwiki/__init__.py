"""Client for the wiki endpoints of the Reddit API: HTTP client, data models and wiki service."""

__version__ = "0.1.0"
__all__ = ["client", "models", "wiki"]