"""Data types of the wiki endpoints and their parsing from API JSON."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import IntEnum
from typing import Any

_USER_KIND = "t2"
_POST_KIND = "t3"


class PermissionLevel(IntEnum):
    """Who may edit a specific wiki page in a subreddit."""

    SUBREDDIT_WIKI_PERMISSIONS = 0
    APPROVED_CONTRIBUTORS_ONLY = 1
    MODERATORS_ONLY = 2


@dataclass
class User:
    """A Reddit account."""

    id: str = ""
    name: str = ""
    created: datetime | None = None
    post_karma: int = 0
    comment_karma: int = 0
    is_friend: bool = False
    is_employee: bool = False
    has_verified_email: bool = False
    nsfw: bool = False
    is_suspended: bool = False


@dataclass
class Post:
    """A submitted link or text post."""

    id: str = ""
    full_id: str = ""
    created: datetime | None = None
    edited: datetime | None = None
    permalink: str = ""
    url: str = ""
    title: str = ""
    body: str = ""
    likes: bool | None = None
    score: int = 0
    upvote_ratio: float = 0.0
    number_of_comments: int = 0
    subreddit_name: str = ""
    subreddit_name_prefixed: str = ""
    subreddit_id: str = ""
    subreddit_subscribers: int = 0
    author: str = ""
    author_id: str = ""
    spoiler: bool = False
    locked: bool = False
    nsfw: bool = False
    is_self_post: bool = False
    saved: bool = False
    stickied: bool = False


@dataclass
class WikiPage:
    """A wiki page in a subreddit."""

    content: str = ""
    reason: str = ""
    may_revise: bool = False
    revision_id: str = ""
    revision_date: datetime | None = None
    revision_by: User | None = None


@dataclass
class WikiPageSettings:
    """Visibility and permission settings of a wiki page."""

    permission_level: PermissionLevel = PermissionLevel.SUBREDDIT_WIKI_PERMISSIONS
    listed: bool = False
    editors: list[User] = field(default_factory=list)


@dataclass
class WikiPageRevision:
    """A revision of a wiki page."""

    id: str = ""
    page: str = ""
    created: datetime | None = None
    reason: str = ""
    hidden: bool = False
    author: User | None = None


@dataclass
class WikiPageEditRequest:
    """A request to edit a wiki page; the reason is optional, up to 256 characters."""

    subreddit: str
    page: str
    content: str
    reason: str = ""

    def to_form(self) -> dict[str, str]:
        """Form fields sent with the edit request."""
        form = {"page": self.page, "content": self.content}
        if self.reason:
            form["reason"] = self.reason
        return form


@dataclass
class WikiPageSettingsUpdateRequest:
    """A request to update a wiki page's visibility and permissions.

    The permission level must always be sent, or the server fails the request.
    """

    permission_level: PermissionLevel
    listed: bool | None = None

    def to_form(self) -> dict[str, str]:
        """Form fields sent with the update request."""
        form = {"permlevel": str(int(self.permission_level))}
        if self.listed is not None:
            form["listed"] = "true" if self.listed else "false"
        return form


@dataclass
class ListOptions:
    """Paging options of listing endpoints."""

    limit: int = 0
    after: str = ""
    before: str = ""

    def to_params(self) -> dict[str, str]:
        """Query parameters for the options that are set."""
        params: dict[str, str] = {}
        if self.limit:
            params["limit"] = str(self.limit)
        if self.after:
            params["after"] = self.after
        if self.before:
            params["before"] = self.before
        return params


def parse_timestamp(value: Any) -> datetime | None:
    """Turn a Unix time in seconds into a UTC datetime.

    ``None`` and ``false`` (used for posts that were never edited) give ``None``.
    Fractions of a second are dropped.
    """
    if value is None or value is False:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"invalid timestamp: {value!r}")
    return datetime.fromtimestamp(int(value), tz=timezone.utc)


def _data(thing: Any, kind: str) -> dict[str, Any] | None:
    if not isinstance(thing, dict) or thing.get("kind") != kind:
        return None
    data = thing.get("data")
    return data if isinstance(data, dict) else None


def parse_user(thing: Any) -> User | None:
    """Parse a ``t2`` thing; anything else gives ``None``."""
    data = _data(thing, _USER_KIND)
    if data is None:
        return None
    return User(
        id=data.get("id") or "",
        name=data.get("name") or "",
        created=parse_timestamp(data.get("created_utc")),
        post_karma=data.get("link_karma") or 0,
        comment_karma=data.get("comment_karma") or 0,
        is_friend=bool(data.get("is_friend")),
        is_employee=bool(data.get("is_employee")),
        has_verified_email=bool(data.get("has_verified_email")),
        nsfw=bool(data.get("over_18")),
        is_suspended=bool(data.get("is_suspended")),
    )


def parse_post(thing: Any) -> Post | None:
    """Parse a ``t3`` thing; anything else gives ``None``."""
    data = _data(thing, _POST_KIND)
    if data is None:
        return None
    return Post(
        id=data.get("id") or "",
        full_id=data.get("name") or "",
        created=parse_timestamp(data.get("created_utc")),
        edited=parse_timestamp(data.get("edited")),
        permalink=data.get("permalink") or "",
        url=data.get("url") or "",
        title=data.get("title") or "",
        body=data.get("selftext") or "",
        likes=data.get("likes"),
        score=data.get("score") or 0,
        upvote_ratio=float(data.get("upvote_ratio") or 0),
        number_of_comments=data.get("num_comments") or 0,
        subreddit_name=data.get("subreddit") or "",
        subreddit_name_prefixed=data.get("subreddit_name_prefixed") or "",
        subreddit_id=data.get("subreddit_id") or "",
        subreddit_subscribers=data.get("subreddit_subscribers") or 0,
        author=data.get("author") or "",
        author_id=data.get("author_fullname") or "",
        spoiler=bool(data.get("spoiler")),
        locked=bool(data.get("locked")),
        nsfw=bool(data.get("over_18")),
        is_self_post=bool(data.get("is_self")),
        saved=bool(data.get("saved")),
        stickied=bool(data.get("stickied")),
    )


def parse_wiki_page(data: dict[str, Any]) -> WikiPage:
    """Parse the data of a ``wikipage`` thing."""
    return WikiPage(
        content=data.get("content_md") or "",
        reason=data.get("reason") or "",
        may_revise=bool(data.get("may_revise")),
        revision_id=data.get("revision_id") or "",
        revision_date=parse_timestamp(data.get("revision_date")),
        revision_by=parse_user(data.get("revision_by")),
    )


def parse_wiki_page_settings(data: dict[str, Any]) -> WikiPageSettings:
    """Parse the data of a ``wikipagesettings`` thing."""
    editors = [user for user in map(parse_user, data.get("editors") or []) if user]
    return WikiPageSettings(
        permission_level=PermissionLevel(data.get("permlevel") or 0),
        listed=bool(data.get("listed")),
        editors=editors,
    )


def parse_wiki_page_revision(data: dict[str, Any]) -> WikiPageRevision:
    """Parse one entry of a wiki revisions listing."""
    return WikiPageRevision(
        id=data.get("id") or "",
        page=data.get("page") or "",
        created=parse_timestamp(data.get("timestamp")),
        reason=data.get("reason") or "",
        hidden=bool(data.get("revision_hidden")),
        author=parse_user(data.get("author")),
    )