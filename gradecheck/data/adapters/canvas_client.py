"""Canvas LMS REST transport.

Performs authenticated GETs and hands back the decoded JSON body. Bodies are
returned for every HTTP status so the caller can inspect Canvas error
payloads such as ``{"errors": [{"message": "Invalid access token."}]}``.

Request failures and undecodable bodies raise ``TransportError``.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import requests

from gradecheck.config.defaults import CANVAS_DEFAULTS
from gradecheck.engine.errors import TransportError

logger = logging.getLogger(__name__)


class CanvasClient:
    """``requests``-backed implementation of ``engine.pipeline.HttpClient``.

    Usage::

        with CanvasClient(timeout=config.canvas.timeout) as client:
            records = run_pipeline(token, domain, config, client)
    """

    def __init__(
        self,
        timeout: float = CANVAS_DEFAULTS["timeout"],
        session: requests.Session | None = None,
    ) -> None:
        self.timeout = timeout
        self.session = session if session is not None else requests.Session()

    def get(self, url: str, headers: Mapping[str, str]) -> Any:
        try:
            resp = self.session.get(
                url,
                headers={"Accept": "application/json", **headers},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise TransportError(f"GET {url} failed: {e}") from e

        if not resp.ok:
            logger.debug("GET %s returned HTTP %d", url, resp.status_code)

        try:
            return resp.json()
        except ValueError as e:
            raise TransportError(
                f"GET {url} returned a non-JSON body (HTTP {resp.status_code})"
            ) from e

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> CanvasClient:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()
