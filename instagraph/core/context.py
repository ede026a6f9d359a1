"""Client credentials and the user-authorization gate."""

from dataclasses import dataclass, field
from typing import Optional

from instagraph.core.exceptions import AuthorizationError


@dataclass(frozen=True)
class ClientContext:
    """
    Credentials shared by every request a client issues.

    A context built without an access token only allows app-level calls
    (authenticated by ``client_id``). Operations on the current user need a
    token. The context never changes after construction.
    """
    client_id: Optional[str] = None
    access_token: Optional[str] = field(default=None, repr=False)

    def __post_init__(self):
        if self.client_id is None and self.access_token is None:
            raise ValueError("ClientContext needs a client_id or an access_token")

    @property
    def is_authorized(self) -> bool:
        return self.access_token is not None

    def require_user_authorization(self) -> None:
        """
        Raises:
            AuthorizationError: If the context holds no user access token
        """
        if not self.is_authorized:
            raise AuthorizationError(
                "This operation requires a user access token; "
                "construct the client with access_token"
            )
