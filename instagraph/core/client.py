"""Instagram Graph API resource client."""

from typing import Any, Mapping, Optional, Sequence, Type, Union

from instagraph.core.context import ClientContext
from instagraph.core.transport import HttpTransport, Transport
from instagraph.core.url_builder import PathLike, UrlBuilder
from instagraph.models.data_models import MediaItem, PagedMediaList, Profile
from instagraph.utils.config import API_BASE_URL, MEDIA_FIELDS, MEDIA_PATH, ME_PATH, USER_FIELDS
from instagraph.utils.logging import get_logger

logger = get_logger(__name__)

# Selects the user the access token belongs to
CURRENT_USER = "me"

UserRef = Union[int, str]


class InstagramClient:
    """
    Central class for interacting with Instagram.

    Not every operation needs a user access token. A client whose context
    only carries a ``client_id`` can read users and media by id, while
    operations on the current user raise ``AuthorizationError`` before
    any request is sent.

    Example:
        context = ClientContext(client_id="123", access_token="IGQ...")
        with InstagramClient(context) as client:
            for media in client.get_all_media().iter_media():
                print(media.permalink)
    """

    def __init__(
        self,
        context: ClientContext,
        transport: Optional[Transport] = None,
        base_url: str = API_BASE_URL,
    ):
        """
        Initialize client.

        Args:
            context: Credentials used for every request
            transport: HTTP transport (optional, an HttpTransport is created if None)
            base_url: Graph API base URL (default: from config)
        """
        self.context = context
        self.url_builder = UrlBuilder(context, base_url)
        self._owns_transport = transport is None
        self.transport: Transport = transport if transport is not None else HttpTransport()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self) -> None:
        """Close the transport if this client created it."""
        if self._owns_transport:
            self.transport.close()

    def is_authorized(self) -> bool:
        return self.context.is_authorized

    # Generic requests

    def get(
        self,
        path: PathLike,
        response_type: Optional[Type] = None,
        params: Optional[Mapping[str, Any]] = None,
        fields: Sequence[str] = (),
        limit: Optional[int] = None,
    ) -> Any:
        """
        GET a resource.

        Args:
            path: Resource path relative to the API base, or an absolute URL
            response_type: Model class to build from the response
                (default: return decoded JSON)
            params: Extra query parameters
            fields: Field selectors
            limit: Page size for list endpoints

        Raises:
            ApiError: If Instagram rejects the request
        """
        url = self.url_builder.build(path, params=params, fields=fields, limit=limit)
        return self._convert(self.transport.get_json(url), response_type)

    def post(
        self,
        path: PathLike,
        data: Optional[Mapping[str, Any]] = None,
        response_type: Optional[Type] = None,
    ) -> Any:
        """POST form data to a resource."""
        url = self.url_builder.build(path)
        return self._convert(self.transport.post_form(url, data), response_type)

    def delete(self, path: PathLike) -> None:
        """DELETE a resource."""
        self.transport.delete_url(self.url_builder.build(path))

    def _convert(self, payload: Any, response_type: Optional[Type]) -> Any:
        if response_type is None:
            return payload
        if issubclass(response_type, PagedMediaList):
            return response_type.from_dict(payload, self.transport)
        return response_type.from_dict(payload)

    def _user_path(self, user: UserRef) -> str:
        if user == CURRENT_USER:
            self.context.require_user_authorization()
            return ME_PATH
        return f"{int(user)}/"

    # Users

    def get_current_user(self, *fields: str) -> Profile:
        """
        Fetch the profile of the user the access token belongs to.

        Args:
            *fields: Field selectors (default: account type, id, media count, username)

        Raises:
            AuthorizationError: If the client has no access token
        """
        path = self._user_path(CURRENT_USER)
        return self.get(path, Profile, fields=fields or (USER_FIELDS,))

    def get_user(self, user_id: int, *fields: str) -> Profile:
        """Fetch a user profile by id. App-level credentials suffice."""
        path = self._user_path(user_id)
        return self.get(path, Profile, fields=fields or (USER_FIELDS,))

    # Media

    def get_all_media(self, user: UserRef = CURRENT_USER, *fields: str) -> PagedMediaList:
        """
        Fetch the first page of a user's media.

        Args:
            user: User id, or CURRENT_USER (requires an access token)
            *fields: Field selectors (default: all media fields)
        """
        path = self._user_path(user) + MEDIA_PATH
        return self.get(path, PagedMediaList, fields=fields or (MEDIA_FIELDS,))

    def get_limited_media(self, user: UserRef, limit: int, *fields: str) -> PagedMediaList:
        """
        Fetch a page of at most ``limit`` media items.

        ``limit`` is passed to Instagram unchecked.
        """
        path = self._user_path(user) + MEDIA_PATH
        logger.debug(f"Fetching up to {limit} media items for {user}")
        return self.get(path, PagedMediaList, fields=fields, limit=limit)

    def get_media(self, media_id: int, *fields: str) -> MediaItem:
        """Fetch a single media item by id."""
        return self.get(f"{int(media_id)}/", MediaItem, fields=fields or (MEDIA_FIELDS,))
