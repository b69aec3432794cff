"""API clients for external services."""

from .face_api import FaceApiClient

__all__ = ["FaceApiClient"]
