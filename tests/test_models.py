from datetime import datetime, timezone

import pytest

from subwiki.models import (
    ListOptions,
    PermissionLevel,
    User,
    WikiPageEditRequest,
    WikiPageSettingsUpdateRequest,
    parse_post,
    parse_timestamp,
    parse_user,
    parse_wiki_page,
    parse_wiki_page_revision,
    parse_wiki_page_settings,
)


def _ts(*args):
    return int(datetime(*args, tzinfo=timezone.utc).timestamp())


USER_THING = {
    "kind": "t2",
    "data": {
        "id": "164ab8",
        "name": "v_95",
        "created_utc": _ts(2017, 3, 12, 4, 56, 47),
        "link_karma": 691,
        "comment_karma": 22235,
        "has_verified_email": True,
        "over_18": True,
    },
}


def test_parse_timestamp_epoch():
    assert parse_timestamp(0) == datetime(1970, 1, 1, tzinfo=timezone.utc)


def test_parse_timestamp_false_and_none():
    assert parse_timestamp(False) is None
    assert parse_timestamp(None) is None


def test_parse_timestamp_drops_fraction():
    assert parse_timestamp(1599278385.9) == parse_timestamp(1599278385)


def test_parse_timestamp_rejects_text():
    with pytest.raises(ValueError):
        parse_timestamp("soon")


def test_parse_user():
    user = parse_user(USER_THING)
    assert user == User(
        id="164ab8",
        name="v_95",
        created=datetime(2017, 3, 12, 4, 56, 47, tzinfo=timezone.utc),
        post_karma=691,
        comment_karma=22235,
        has_verified_email=True,
        nsfw=True,
    )


def test_parse_user_wrong_kind():
    assert parse_user({"kind": "t3", "data": {}}) is None
    assert parse_user(None) is None


def test_parse_post_wrong_kind():
    assert parse_post(USER_THING) is None


def test_parse_post_never_edited():
    post = parse_post({"kind": "t3", "data": {"id": "imj8g5", "edited": False, "likes": None}})
    assert post.id == "imj8g5"
    assert post.edited is None
    assert post.likes is None


def test_parse_wiki_page_without_author():
    page = parse_wiki_page({"content_md": "text", "may_revise": True})
    assert page.content == "text"
    assert page.may_revise is True
    assert page.revision_by is None


def test_parse_wiki_page_settings_skips_non_users():
    settings = parse_wiki_page_settings(
        {"permlevel": 2, "listed": False, "editors": [USER_THING, {"kind": "t3", "data": {}}]}
    )
    assert settings.permission_level is PermissionLevel.MODERATORS_ONLY
    assert [editor.name for editor in settings.editors] == ["v_95"]


def test_parse_wiki_page_revision():
    revision = parse_wiki_page_revision(
        {"id": "rev", "page": "index", "revision_hidden": True, "author": USER_THING}
    )
    assert revision.hidden is True
    assert revision.author == parse_user(USER_THING)


def test_edit_request_form_omits_empty_reason():
    request = WikiPageEditRequest(subreddit="sub", page="testpage", content="testcontent")
    assert request.to_form() == {"page": "testpage", "content": "testcontent"}


def test_edit_request_form_with_reason():
    request = WikiPageEditRequest("sub", "testpage", "testcontent", "testreason")
    assert request.to_form()["reason"] == "testreason"
    assert "sub" not in request.to_form().values()


def test_settings_update_form():
    request = WikiPageSettingsUpdateRequest(PermissionLevel.APPROVED_CONTRIBUTORS_ONLY, listed=False)
    assert request.to_form() == {"permlevel": "1", "listed": "false"}


def test_settings_update_form_without_listed():
    request = WikiPageSettingsUpdateRequest(PermissionLevel.SUBREDDIT_WIKI_PERMISSIONS)
    assert request.to_form() == {"permlevel": "0"}


def test_list_options_params():
    assert ListOptions().to_params() == {}
    assert ListOptions(limit=10, after="a").to_params() == {"limit": "10", "after": "a"}