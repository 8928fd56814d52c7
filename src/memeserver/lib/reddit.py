"""Reddit API client: client-credentials token exchange and hot listing fetch.

Nothing here is cached. Every call goes back to Reddit, and every failure is
raised to the caller as a ``FetchError`` subclass without retrying.
"""

import logging

import httpx

from ..errors import EmptyResultError
from ..models import AccessTokenResponse, Credentials, Listing, Post
from .http import parse_json, send

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

TOKEN_URL = "https://www.reddit.com/api/v1/access_token"
OAUTH_API_BASE = "https://oauth.reddit.com"
SUBREDDIT = "wholesomememes"

# Reddit rejects requests with a default or empty user agent.
USER_AGENT = "memeserver/0.1.0"

# ---------------------------------------------------------------------------
# Selection policy
# ---------------------------------------------------------------------------

# Rank of the featured post in the hot listing. We ask for exactly this many
# posts and take the last one, so the most popular post is skipped.
FEATURED_RANK = 2


def listing_url(subreddit: str = SUBREDDIT) -> str:
    return f"{OAUTH_API_BASE}/r/{subreddit}/hot.json"


async def fetch_access_token(http: httpx.AsyncClient, credentials: Credentials) -> str:
    """Exchange the app credentials for a bearer token.

    Raises ``NetworkError`` if Reddit can't be reached and ``ProtocolError``
    if the response has no ``access_token``.
    """
    response = await send(
        http,
        "POST",
        TOKEN_URL,
        # (None, value) makes httpx send the field as multipart/form-data.
        files={"grant_type": (None, "client_credentials")},
        auth=httpx.BasicAuth(
            credentials.client_id, credentials.client_secret.get_secret_value()
        ),
        headers={"User-Agent": USER_AGENT},
    )
    token = parse_json(response, AccessTokenResponse)
    logger.info("Obtained Reddit access token (status %s)", response.status_code)
    return token.access_token


async def fetch_featured_post(http: httpx.AsyncClient, access_token: str) -> Post:
    """Fetch the hot listing and return the post at ``FEATURED_RANK``.

    Raises ``EmptyResultError`` if the listing has no posts, otherwise the
    same errors as :func:`fetch_access_token`.
    """
    response = await send(
        http,
        "GET",
        listing_url(),
        params={"limit": str(FEATURED_RANK)},
        headers={
            "Authorization": f"Bearer {access_token}",
            "User-Agent": USER_AGENT,
        },
    )
    listing = parse_json(response, Listing)

    children = listing.data.children
    if not children:
        raise EmptyResultError(f"no posts in r/{SUBREDDIT} hot listing")

    post = children[-1].data
    logger.info("Featured post from %d candidate(s): %s", len(children), post.permalink)
    return post
