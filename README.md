# subwiki

A small client for the wiki section of the Reddit API. It fetches wiki pages and
their revisions, edits and reverts pages, reads and updates page settings,
allows or denies editors, toggles the visibility of revisions and lists the
posts that discuss a page.

## Installation

```
pip install subwiki
```

## Usage

```python
import requests

from subwiki.client import Client, RedditError
from subwiki.models import (
    ListOptions,
    PermissionLevel,
    WikiPageEditRequest,
    WikiPageSettingsUpdateRequest,
)
from subwiki.wiki import WikiService

session = requests.Session()
session.headers["Authorization"] = "Bearer token"

client = Client("https://oauth.reddit.com/", session, "subwiki-example/0.1")
wiki = WikiService(client)

# Read pages
page = wiki.page("mysubreddit", "index")
if page is not None:
    print(page.content, page.revision_by.name if page.revision_by else None)

old = wiki.page_revision("mysubreddit", "index", "some-revision-id")
names = wiki.pages("mysubreddit")          # list of page names

# Edit and revert
wiki.edit(WikiPageEditRequest(
    subreddit="mysubreddit",
    page="index",
    content="# Hello",
    reason="first draft",
))
wiki.revert("mysubreddit", "index", "some-revision-id")

# Settings and editors
settings = wiki.settings("mysubreddit", "index")
settings = wiki.update_settings(
    "mysubreddit",
    "index",
    WikiPageSettingsUpdateRequest(
        permission_level=PermissionLevel.APPROVED_CONTRIBUTORS_ONLY,
        listed=False,
    ),
)
wiki.allow("mysubreddit", "index", "someuser")
wiki.deny("mysubreddit", "index", "someuser")

# Revisions and discussions
revisions = wiki.revisions_page("mysubreddit", "index", ListOptions(limit=10))
all_revisions = wiki.revisions("mysubreddit", None)
hidden = wiki.toggle_visibility("mysubreddit", "index", "some-revision-id")
posts = wiki.discussions("mysubreddit", "index", None)
```

### Modules

- `subwiki.client` — `Client`, which sends GET requests and url-encoded POST
  forms relative to a base URL (default `https://oauth.reddit.com`) and decodes
  the JSON answers, and `RedditError`.
- `subwiki.models` — the dataclasses `User`, `Post`, `WikiPage`,
  `WikiPageSettings`, `WikiPageRevision`, `WikiPageEditRequest`,
  `WikiPageSettingsUpdateRequest` and `ListOptions`, the `PermissionLevel`
  enum, and the `parse_*` functions that build them from API JSON.
- `subwiki.wiki` — `WikiService`, one method per wiki endpoint.

### Behaviour worth knowing

- A response with a status outside 2xx, or a body that is not valid JSON,
  raises `RedditError`, which carries `status_code`, `message`, `method` and
  `url`.
- Passing `None` where an edit or settings update request is expected raises
  `ValueError`.
- `page`, `page_revision`, `settings` and `update_settings` return `None` when
  the answer is not a thing of the expected kind.
- Revision cursors given in `ListOptions.after` and `ListOptions.before` are
  prefixed with `WikiRevision_` when the prefix is missing; the options object
  you pass is not changed.
- Timestamps become timezone-aware UTC `datetime` values; a post's `edited`
  is `None` when it was never edited.

## What it does not do

The package does not log in or obtain OAuth tokens. Authentication is up to
the `requests.Session` you pass to `Client`, for example by setting its
`Authorization` header. It covers only the wiki endpoints and does not page
through listings on its own: pass `ListOptions` with `after` or `before` to
fetch further pages.

## Running the tests

```
pip install -e ".[test]"
pytest
```