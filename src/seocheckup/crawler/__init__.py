"""Network collaborator for checkups."""

from .http_client import HttpClient

__all__ = ["HttpClient"]
