#!/usr/bin/env python3
"""
Show the Instagram profile and recent media for an access token.

Useful for checking that a long-lived token still works.
"""

import getpass
import logging
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from instagraph.core.client import CURRENT_USER, InstagramClient
from instagraph.core.context import ClientContext
from instagraph.core.exceptions import ApiError
from instagraph.utils.logging import setup_logging

PAGE_SIZE = 10


def show_media(max_items: int = 30):
    """Print the current user's profile and up to max_items media items."""
    setup_logging(level=logging.WARNING)

    token = getpass.getpass("Instagram access token: ").strip()
    if not token:
        print("❌ Access token required")
        sys.exit(1)

    context = ClientContext(access_token=token)

    try:
        with InstagramClient(context) as client:
            profile = client.get_current_user()
            print(f"\n👤 @{profile.username} ({profile.account_type}, {profile.media_count} media)\n")
            print("=" * 80)

            first_page = client.get_limited_media(CURRENT_USER, PAGE_SIZE)
            for count, media in enumerate(first_page.iter_media(), start=1):
                when = media.timestamp.strftime("%Y-%m-%d %H:%M") if media.timestamp else "?"
                caption = (media.caption or "").replace("\n", " ")[:50]
                print(f"{when}  {media.media_type or '':<15} {media.permalink}  {caption}")
                if count >= max_items:
                    break

    except ApiError as e:
        print(f"\n❌ ERROR: {e}")
        sys.exit(1)


if __name__ == "__main__":
    show_media()
