"""Helpers shared by account use cases."""

from typing import Optional

from soular.domain.error import AuthError
from soular.domain.model import ViewerSession


def require_viewer(viewer: Optional[ViewerSession], action: str) -> ViewerSession:
    """Return the viewer or raise AuthError for anonymous callers."""
    if viewer is None:
        raise AuthError(f"You must be logged in to {action}")
    return viewer
