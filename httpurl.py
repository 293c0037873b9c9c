import logging
from dataclasses import dataclass

from httperrors import MalformedURL

logger = logging.getLogger(__name__)

DEFAULT_PORT = "80"
SCHEMES = ("http://", "https://")

@dataclass(frozen=True)
class ParsedURL:
    """Host, port and path of a URL; path is stored without its leading slash."""
    host: str
    port: str = DEFAULT_PORT
    path: str = ""

def strip_scheme(url):
    """Remove a leading http:// or https:// (exact, case-sensitive)"""
    for scheme in SCHEMES:
        if url.startswith(scheme):
            return url[len(scheme):]
    return url

def parse_url(url):
    """Split [scheme://]host[:port]/path into a ParsedURL.

    The path is split off before the port so that a colon inside the path is
    never taken for a port separator. Raises MalformedURL when the host is
    empty.
    """
    rest = strip_scheme(url)

    hostport, slash, path = rest.partition("/")
    if not slash:
        path = ""

    host, colon, port = hostport.partition(":")
    if not colon or not port:
        port = DEFAULT_PORT

    if not host:
        raise MalformedURL(url)

    parsed = ParsedURL(host, port, path)
    logger.debug(f"Parsed {url!r} as host={host!r} port={port!r} path={path!r}")
    return parsed
