"""Viewer session.

The acting identity is passed explicitly to whatever needs it; nothing reads
it from global state.
"""

from typing import Optional

from soular.domain.value import UserId
from soular.domain.value.common import ValueObject


class ViewerSession(ValueObject):
    """The currently acting user.

    Required for every mutation. A missing session means read-only viewing.
    """

    user_id: UserId
    display_name: str
    avatar: Optional[str] = None
    access_token: Optional[str] = None  # Bearer token forwarded to the API
