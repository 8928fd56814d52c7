"""Error taxonomy for the meme server.

``ConfigError`` is raised at startup only. Everything deriving from
``FetchError`` is raised while serving a request and is mapped to a 500 by
the router.
"""


class ConfigError(Exception):
    """A required environment variable is missing or malformed."""


class FetchError(Exception):
    """Base class for failures talking to the Reddit API."""


class NetworkError(FetchError):
    """The request never produced a response (DNS, connect, timeout...)."""


class ProtocolError(FetchError):
    """The response body was not the JSON shape we expected."""


class EmptyResultError(FetchError):
    """The listing was fetched fine but had no posts in it."""
