"""Request URL construction for the Instagram Graph API."""

from typing import Any, Mapping, Optional, Sequence, Union
from urllib.parse import urljoin

import httpx

from instagraph.core.context import ClientContext
from instagraph.utils.config import API_BASE_URL, MEDIA_FIELDS

PathLike = Union[str, httpx.URL]

CREDENTIAL_PARAMS = ("access_token", "client_id")


class UrlBuilder:
    """
    Builds fully qualified API URLs for a client context.

    Every URL carries exactly one credential parameter: ``access_token``
    when the context holds a user token, ``client_id`` otherwise.
    """

    def __init__(self, context: ClientContext, base_url: str = API_BASE_URL):
        self.context = context
        self.base_url = base_url

    def resolve(self, path: PathLike) -> str:
        """Resolve a resource path against the base URL. Absolute URLs are kept as given."""
        return urljoin(self.base_url, str(path))

    def credentials(self) -> dict:
        if self.context.is_authorized:
            return {"access_token": self.context.access_token}
        return {"client_id": self.context.client_id}

    def build(
        self,
        path: PathLike,
        params: Optional[Mapping[str, Any]] = None,
        fields: Sequence[str] = (),
        limit: Optional[int] = None,
    ) -> str:
        """
        Build an absolute URL.

        Args:
            path: Resource path relative to the base URL, or an absolute URL
            params: Extra query parameters; credential keys are ignored
            fields: Field selectors, joined with commas into ``fields``
            limit: Page size; implies the default media fields when no
                fields are given

        Returns:
            URL string
        """
        query = {
            key: str(value)
            for key, value in (params or {}).items()
            if key not in CREDENTIAL_PARAMS
        }
        if fields:
            query["fields"] = ",".join(fields)
        if limit is not None:
            query.setdefault("fields", MEDIA_FIELDS)
            query["limit"] = str(limit)
        query.update(self.credentials())

        # Exactly one credential per URL, even when an absolute URL brings its own
        url = httpx.URL(self.resolve(path))
        for key in CREDENTIAL_PARAMS:
            if key in url.params:
                url = url.copy_remove_param(key)
        return str(url.copy_merge_params(query))
