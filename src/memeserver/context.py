from typing import Annotated

import httpx
from fastapi import Depends, Request
from pydantic import BaseModel, ConfigDict

from .config import HTTP_TIMEOUT_SECONDS
from .models import Credentials


class AppContext(BaseModel):
    """Per-process state shared by every request.

    Built once in the app lifespan and stored on ``app.state.context``.
    Tests replace it with one whose client uses a fake transport.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    http: httpx.AsyncClient
    credentials: Credentials


def build_http_client(**kwargs) -> httpx.AsyncClient:
    return httpx.AsyncClient(timeout=httpx.Timeout(HTTP_TIMEOUT_SECONDS), **kwargs)


def get_context(request: Request) -> AppContext:
    return request.app.state.context


AppContextDep = Annotated[AppContext, Depends(get_context)]
