"""Blocking HTTPS retrieval for remote include targets."""
from __future__ import annotations

import http.client
import logging
from pathlib import Path
from typing import Any, Callable, Dict, Optional
from urllib.request import Request, urlopen

from archdsl.core.exceptions import IncludeResolutionError

logger = logging.getLogger(__name__)

Fetcher = Callable[[str], str]


def fetch_text(
    url: str,
    *,
    timeout_seconds: Optional[float] = None,
    user_agent: Optional[str] = None,
) -> str:
    """Fetch ``url`` and return the full response body decoded as UTF-8.

    Blocks until the body has been read. Without ``timeout_seconds`` the call
    waits as long as the connection stays open.

    Raises:
        IncludeResolutionError: On any transport, HTTP status or decoding
            failure; the original exception is chained.
    """
    headers: Dict[str, str] = {}
    if user_agent:
        headers["User-Agent"] = user_agent
    kwargs: Dict[str, Any] = {}
    if timeout_seconds is not None:
        kwargs["timeout"] = timeout_seconds

    logger.debug("Fetching remote include %s", url)
    try:
        with urlopen(Request(url, headers=headers, method="GET"), **kwargs) as response:
            body = response.read()
        return body.decode("utf-8")
    except (OSError, ValueError, http.client.HTTPException) as exc:
        # URLError/HTTPError are OSErrors; UnicodeDecodeError and malformed URLs are ValueErrors.
        raise IncludeResolutionError(str(exc), source=url, cause=exc) from exc


class RemoteFetcher:
    """Callable fetcher bound to configured timeout and user agent."""

    def __init__(self, *, timeout_seconds: Optional[float] = None, user_agent: Optional[str] = None) -> None:
        self.timeout_seconds = timeout_seconds
        self.user_agent = user_agent

    @classmethod
    def from_config(cls, repo_root: Optional[Path] = None) -> "RemoteFetcher":
        from archdsl.core.config import IncludeConfig

        cfg = IncludeConfig(repo_root=repo_root)
        return cls(timeout_seconds=cfg.fetch_timeout_seconds, user_agent=cfg.user_agent)

    def __call__(self, url: str) -> str:
        return fetch_text(url, timeout_seconds=self.timeout_seconds, user_agent=self.user_agent)


__all__ = ["Fetcher", "RemoteFetcher", "fetch_text"]
