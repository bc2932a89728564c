"""Wiki endpoints of the Reddit API."""

from __future__ import annotations

from dataclasses import replace
from typing import Any

from .client import Client
from .models import (
    ListOptions,
    Post,
    WikiPage,
    WikiPageEditRequest,
    WikiPageRevision,
    WikiPageSettings,
    WikiPageSettingsUpdateRequest,
    parse_post,
    parse_wiki_page,
    parse_wiki_page_revision,
    parse_wiki_page_settings,
)

_REVISION_PREFIX = "WikiRevision_"


def _thing_data(thing: dict[str, Any], kind: str) -> Any:
    return thing.get("data") if thing.get("kind") == kind else None


def _with_prefix(value: str) -> str:
    if value and not value.startswith(_REVISION_PREFIX):
        return _REVISION_PREFIX + value
    return value


class WikiService:
    """Reads and manages the wiki of a subreddit."""

    def __init__(self, client: Client) -> None:
        self._client = client

    def page(self, subreddit: str, page: str) -> WikiPage | None:
        """Get the latest version of a wiki page."""
        return self.page_revision(subreddit, page, "")

    def page_revision(self, subreddit: str, page: str, revision_id: str = "") -> WikiPage | None:
        """Get a wiki page as it was at a revision; an empty id gives the latest."""
        params = {"v": revision_id} if revision_id else None
        thing = self._client.get_thing(f"r/{subreddit}/wiki/{page}", params)
        data = _thing_data(thing, "wikipage")
        return parse_wiki_page(data) if isinstance(data, dict) else None

    def pages(self, subreddit: str) -> list[str]:
        """List the names of the subreddit's wiki pages."""
        thing = self._client.get_thing(f"r/{subreddit}/wiki/pages")
        data = _thing_data(thing, "wikipagelisting")
        return list(data) if isinstance(data, list) else []

    def edit(self, request: WikiPageEditRequest) -> None:
        """Edit a wiki page."""
        if request is None:
            raise ValueError("edit request cannot be None")
        self._client.post_form(f"r/{request.subreddit}/api/wiki/edit", request.to_form())

    def revert(self, subreddit: str, page: str, revision_id: str) -> None:
        """Revert a wiki page to a revision."""
        self._client.post_form(
            f"r/{subreddit}/api/wiki/revert", {"page": page, "revision": revision_id}
        )

    def settings(self, subreddit: str, page: str) -> WikiPageSettings | None:
        """Get a wiki page's settings."""
        thing = self._client.get_thing(f"r/{subreddit}/wiki/settings/{page}")
        return self._settings_of(thing)

    def update_settings(
        self, subreddit: str, page: str, request: WikiPageSettingsUpdateRequest
    ) -> WikiPageSettings | None:
        """Update a wiki page's settings and return the new ones."""
        if request is None:
            raise ValueError("settings update request cannot be None")
        body = self._client.post_form(f"r/{subreddit}/wiki/settings/{page}", request.to_form())
        return self._settings_of(body if isinstance(body, dict) else {})

    @staticmethod
    def _settings_of(thing: dict[str, Any]) -> WikiPageSettings | None:
        data = _thing_data(thing, "wikipagesettings")
        return parse_wiki_page_settings(data) if isinstance(data, dict) else None

    def discussions(
        self, subreddit: str, page: str, options: ListOptions | None = None
    ) -> list[Post]:
        """List the posts that discuss a wiki page."""
        children = self._client.get_listing(f"r/{subreddit}/wiki/discussions/{page}", options)
        return [post for post in map(parse_post, children) if post is not None]

    def toggle_visibility(self, subreddit: str, page: str, revision_id: str) -> bool:
        """Toggle whether a revision is public; returns whether it is now hidden."""
        body = self._client.post_form(
            f"r/{subreddit}/api/wiki/hide", {"page": page, "revision": revision_id}
        )
        return bool(body.get("status")) if isinstance(body, dict) else False

    def revisions(
        self, subreddit: str, options: ListOptions | None = None
    ) -> list[WikiPageRevision]:
        """List revisions of all pages in the wiki."""
        return self.revisions_page(subreddit, "", options)

    def revisions_page(
        self, subreddit: str, page: str, options: ListOptions | None = None
    ) -> list[WikiPageRevision]:
        """List revisions of one page, or of all pages if ``page`` is empty."""
        path = f"r/{subreddit}/wiki/revisions"
        if page:
            path += f"/{page}"
        params = None
        if options is not None:
            prefixed = replace(
                options, after=_with_prefix(options.after), before=_with_prefix(options.before)
            )
            params = prefixed.to_params()
        body = self._client.get_json(path, params)
        data = body.get("data") if isinstance(body, dict) else None
        children = data.get("children") if isinstance(data, dict) else None
        return [parse_wiki_page_revision(child) for child in children or []]

    def allow(self, subreddit: str, page: str, username: str) -> None:
        """Allow a user to edit a wiki page."""
        self._client.post_form(
            f"r/{subreddit}/api/wiki/alloweditor/add", {"page": page, "username": username}
        )

    def deny(self, subreddit: str, page: str, username: str) -> None:
        """Take away a user's ability to edit a wiki page."""
        self._client.post_form(
            f"r/{subreddit}/api/wiki/alloweditor/del", {"page": page, "username": username}
        )