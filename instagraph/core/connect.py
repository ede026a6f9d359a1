"""Adapter exposing an InstagramClient as a service-provider connection."""

from instagraph.core.client import InstagramClient
from instagraph.core.exceptions import ApiError, AuthorizationError
from instagraph.models.data_models import ConnectionValues, UserProfile
from instagraph.utils.logging import get_logger

logger = get_logger(__name__)


class InstagramApiAdapter:
    """Maps the current user's Instagram account onto generic connection data."""

    def test(self, client: InstagramClient) -> bool:
        """Return True if the client's credentials can read the current user."""
        try:
            client.get_current_user("id")
            return True
        except (ApiError, AuthorizationError) as e:
            logger.info(f"Instagram connection test failed: {e}")
            return False

    def set_connection_values(self, client: InstagramClient) -> ConnectionValues:
        profile = client.get_current_user("id", "username")
        return ConnectionValues(
            provider_user_id=str(profile.id) if profile.id is not None else None,
            display_name=profile.username,
        )

    def fetch_user_profile(self, client: InstagramClient) -> UserProfile:
        profile = client.get_current_user()
        return UserProfile(username=profile.username)

    def update_status(self, client: InstagramClient, message: str) -> None:
        # Instagram has no status updates
        pass
