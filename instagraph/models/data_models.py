"""Data models for Instagram Graph API responses."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Iterator, Optional, Tuple

from instagraph.core.exceptions import InvalidStateError, ParsingError
from instagraph.core.transport import HttpTransport, Transport
from instagraph.utils.logging import get_logger

logger = get_logger(__name__)

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S%z"
TIMESTAMP_FORMAT_FRACTIONAL = "%Y-%m-%dT%H:%M:%S.%f%z"


def _parse_id(value: Any) -> Optional[int]:
    """Graph API ids arrive as JSON strings or numbers."""
    if value is None:
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ParsingError(f"Invalid id: {value!r}")


def parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    """Parse an ISO-8601 timestamp such as ``2020-05-19T18:50:02+0000``."""
    if value is None:
        return None
    for fmt in (TIMESTAMP_FORMAT, TIMESTAMP_FORMAT_FRACTIONAL):
        try:
            return datetime.strptime(value, fmt)
        except ValueError:
            pass
    # fromisoformat only accepts a trailing Z from Python 3.11
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        raise ParsingError(f"Invalid timestamp: {value!r}")


def _require_dict(data: Any, what: str) -> dict:
    if not isinstance(data, dict):
        raise ParsingError(f"Expected a JSON object for {what}, got {type(data).__name__}")
    return data


@dataclass(frozen=True)
class Profile:
    """
    An Instagram user profile.

    Fields not requested through a field selector are left as None.
    """
    id: Optional[int] = None
    account_type: Optional[str] = None
    media_count: Optional[int] = None
    username: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> "Profile":
        data = _require_dict(data, "profile")
        media_count = data.get("media_count")
        return cls(
            id=_parse_id(data.get("id")),
            account_type=data.get("account_type"),
            media_count=int(media_count) if media_count is not None else None,
            username=data.get("username"),
        )


@dataclass(frozen=True)
class MediaItem:
    """A single image, video or carousel album."""
    id: Optional[int] = None
    caption: Optional[str] = None
    media_type: Optional[str] = None  # IMAGE, VIDEO or CAROUSEL_ALBUM
    media_url: Optional[str] = None
    permalink: Optional[str] = None
    thumbnail_url: Optional[str] = None  # videos only
    timestamp: Optional[datetime] = None
    username: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> "MediaItem":
        data = _require_dict(data, "media")
        return cls(
            id=_parse_id(data.get("id")),
            caption=data.get("caption"),
            media_type=data.get("media_type"),
            media_url=data.get("media_url"),
            permalink=data.get("permalink"),
            thumbnail_url=data.get("thumbnail_url"),
            timestamp=parse_timestamp(data.get("timestamp")),
            username=data.get("username"),
        )

    def to_dict(self) -> dict:
        """Render the item in the Graph API wire format, omitting unset fields."""
        data = {
            "id": self.id,
            "caption": self.caption,
            "media_type": self.media_type,
            "media_url": self.media_url,
            "permalink": self.permalink,
            "thumbnail_url": self.thumbnail_url,
            "timestamp": self._format_timestamp(),
            "username": self.username,
        }
        return {key: value for key, value in data.items() if value is not None}

    def _format_timestamp(self) -> Optional[str]:
        if self.timestamp is None:
            return None
        if self.timestamp.microsecond:
            return self.timestamp.strftime(TIMESTAMP_FORMAT_FRACTIONAL)
        return self.timestamp.strftime(TIMESTAMP_FORMAT)


@dataclass(frozen=True)
class PagedMediaList:
    """
    One page of media plus the locator of the next page, if any.

    The next-page URL comes straight from the response's ``paging.next``
    and is requested as given. Fetching a page never changes this object.
    """
    items: Tuple[MediaItem, ...] = ()
    next_url: Optional[str] = None
    transport: Optional[Transport] = field(default=None, compare=False, repr=False)

    @classmethod
    def from_dict(cls, data: Any, transport: Optional[Transport] = None) -> "PagedMediaList":
        data = _require_dict(data, "media list")

        entries = data.get("data") or []
        if not isinstance(entries, list):
            raise ParsingError("Expected 'data' to be a list")

        next_url = None
        paging = data.get("paging")
        if isinstance(paging, dict) and paging.get("next") is not None:
            next_url = str(paging["next"])

        return cls(
            items=tuple(MediaItem.from_dict(entry) for entry in entries),
            next_url=next_url,
            transport=transport,
        )

    @property
    def page(self) -> Tuple[MediaItem, ...]:
        return self.items

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[MediaItem]:
        return iter(self.items)

    def has_more_pages(self) -> bool:
        return self.next_url is not None

    def get_next_page(self) -> "PagedMediaList":
        """
        Fetch the following page.

        Returns:
            A new PagedMediaList

        Raises:
            InvalidStateError: If there are no more pages
            ApiError: If Instagram rejects the request
        """
        if not self.has_more_pages():
            raise InvalidStateError("No next page; check has_more_pages() first")

        if self.transport is not None:
            return PagedMediaList.from_dict(self.transport.get_json(self.next_url), self.transport)

        logger.debug("No transport attached to page, using a one-off HTTP transport")
        with HttpTransport() as transport:
            return PagedMediaList.from_dict(transport.get_json(self.next_url))

    def iter_pages(self) -> Iterator["PagedMediaList"]:
        """Yield this page and every following page."""
        page = self
        yield page
        while page.has_more_pages():
            page = page.get_next_page()
            yield page

    def iter_media(self) -> Iterator[MediaItem]:
        """Yield every media item from this page onwards."""
        for page in self.iter_pages():
            yield from page.items


@dataclass(frozen=True)
class ConnectionValues:
    """Values identifying a connected Instagram account."""
    provider_user_id: Optional[str] = None
    display_name: Optional[str] = None


@dataclass(frozen=True)
class UserProfile:
    """Provider-neutral profile of a connected user."""
    username: Optional[str] = None
