"""Root page: fetch a featured post from Reddit and render it.

GET /
    Exchange the app credentials for a token, fetch the featured post from
    the hot listing and return it as an HTML page.
"""

import logging

from fastapi import APIRouter
from fastapi.responses import HTMLResponse, PlainTextResponse, Response

from ..context import AppContextDep
from ..errors import FetchError
from ..lib.reddit import fetch_access_token, fetch_featured_post
from ..lib.render import render_post

router = APIRouter(tags=["meme"])

logger = logging.getLogger(__name__)

TOKEN_FAILURE_MESSAGE = "failed to fetch access token"
CONTENT_FAILURE_MESSAGE = "failed to fetch meme content"


@router.get("/", response_class=HTMLResponse)
async def featured_meme(context: AppContextDep) -> Response:
    """Render the featured post. Any upstream failure becomes a plain 500."""
    try:
        token = await fetch_access_token(context.http, context.credentials)
    except FetchError:
        logger.exception("Reddit access token request failed")
        return PlainTextResponse(TOKEN_FAILURE_MESSAGE, status_code=500)

    try:
        post = await fetch_featured_post(context.http, token)
    except FetchError:
        logger.exception("Reddit listing request failed")
        return PlainTextResponse(CONTENT_FAILURE_MESSAGE, status_code=500)

    return HTMLResponse(render_post(post))
