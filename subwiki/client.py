"""A small HTTP client for the Reddit API."""

from __future__ import annotations

from typing import Any

import requests

from .models import ListOptions

DEFAULT_BASE_URL = "https://oauth.reddit.com"
DEFAULT_USER_AGENT = "subwiki/0.1.0"


class RedditError(Exception):
    """The API answered with an error status."""

    def __init__(self, status_code: int, message: str, method: str = "", url: str = "") -> None:
        self.status_code = status_code
        self.message = message
        self.method = method
        self.url = url
        super().__init__(f"{method} {url}: {status_code} {message}".strip())


class Client:
    """Sends requests to the API and decodes its JSON answers."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        session: requests.Session | None = None,
        user_agent: str = DEFAULT_USER_AGENT,
    ) -> None:
        self.base_url = base_url.rstrip("/") + "/"
        self.session = session if session is not None else requests.Session()
        self.user_agent = user_agent

    def _request(
        self,
        method: str,
        path: str,
        params: dict[str, str] | None = None,
        form: dict[str, str] | None = None,
    ) -> Any:
        url = self.base_url + path.lstrip("/")
        response = self.session.request(
            method,
            url,
            params=params or None,
            data=form,
            headers={"User-Agent": self.user_agent},
        )
        if not 200 <= response.status_code < 300:
            raise RedditError(response.status_code, _error_message(response), method, url)
        if not response.content.strip():
            return None
        try:
            return response.json()
        except ValueError as exc:
            raise RedditError(response.status_code, "invalid JSON in response", method, url) from exc

    def get_json(self, path: str, params: dict[str, str] | None = None) -> Any:
        """GET a path and return the decoded body, or ``None`` if it is empty."""
        return self._request("GET", path, params=params)

    def post_form(self, path: str, form: dict[str, str]) -> Any:
        """POST a url-encoded form and return the decoded body, or ``None`` if it is empty."""
        return self._request("POST", path, form=form)

    def get_thing(self, path: str, params: dict[str, str] | None = None) -> dict[str, Any]:
        """GET a single thing (an object with ``kind`` and ``data``)."""
        body = self.get_json(path, params)
        return body if isinstance(body, dict) else {}

    def get_listing(self, path: str, options: ListOptions | None = None) -> list[Any]:
        """GET a listing and return its children."""
        params = options.to_params() if options is not None else None
        body = self.get_json(path, params)
        if not isinstance(body, dict):
            return []
        data = body.get("data")
        if not isinstance(data, dict):
            return []
        return list(data.get("children") or [])


def _error_message(response: requests.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict):
        for key in ("message", "error"):
            if body.get(key):
                return str(body[key])
    return response.reason or ""