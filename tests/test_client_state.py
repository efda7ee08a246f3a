import io

import pytest

from recycling_news.client.api import ApiClient, ApiError
from recycling_news.client.state import (
    ADMIN_VIEW,
    DETAIL_VIEW,
    LIST_VIEW,
    NewsState,
    filter_articles,
)
from conftest import make_article

ARTICLES = [
    {"id": "a", "title": "Steel prices climb", "excerpt": "", "content": "", "category_id": "4"},
    {"id": "b", "title": "Sorting robots", "excerpt": "AI and STEEL", "content": "", "category_id": "2"},
    {"id": "c", "title": "Battery recycling", "excerpt": "", "content": "lithium and steel", "category_id": "2"},
    {"id": "d", "title": "Aluminum", "excerpt": "", "content": "", "category_id": None},
]


def ids(articles):
    return [a["id"] for a in articles]


def test_filter_by_category_only():
    assert ids(filter_articles(ARTICLES, "2", "")) == ["b", "c"]
    assert ids(filter_articles(ARTICLES, None, "")) == ["a", "b", "c", "d"]


def test_search_matches_any_field_case_insensitively():
    assert ids(filter_articles(ARTICLES, None, "Steel")) == ["a", "b", "c"]
    assert ids(filter_articles(ARTICLES, None, "   ")) == ["a", "b", "c", "d"]


def test_category_and_search_are_combined():
    assert ids(filter_articles(ARTICLES, "2", "steel")) == ["b", "c"]
    assert ids(filter_articles(ARTICLES, "4", "robots")) == []


@pytest.fixture
def state(client):
    news = NewsState(ApiClient(client=client))
    news.load()
    return news


def test_load_and_eager_refilter(state):
    assert len(state.articles) == 6
    assert len(state.categories) == 5
    assert ids(state.filtered_articles) == ids(state.articles)

    state.selected_category = "2"
    assert {a["category_id"] for a in state.filtered_articles} == {"2"}

    state.search_query = "aluminum"
    assert ids(state.filtered_articles) == ["6"]

    state.selected_category = None
    state.search_query = ""
    assert len(state.filtered_articles) == 6


def test_detail_view_renders_body(state, client):
    client.put("/api/articles/2", json={"content": "Look: ![robot](http://x/robot.png)"})
    state.load()

    state.open_article("2")
    assert state.view == DETAIL_VIEW
    assert '<img src="http://x/robot.png" alt="robot"' in state.detail_html

    state.back_to_list()
    assert state.view == LIST_VIEW
    assert state.selected_article is None
    assert state.detail_html == ""


def test_open_unknown_article(state):
    with pytest.raises(KeyError):
        state.open_article("missing")


def test_unknown_category_name(state, client):
    client.post("/api/articles", json=make_article("100", category_id="gone"))
    state.load()

    article = next(a for a in state.articles if a["id"] == "100")
    assert state.category_name(article) == "Unknown"
    seeded = next(a for a in state.articles if a["id"] == "1")
    assert state.category_name(seeded) == "Industry News"


def test_admin_view_requires_admin_login(state):
    with pytest.raises(PermissionError):
        state.open_admin()

    state.register("reader", "reader@example.com", "pw")
    with pytest.raises(PermissionError):
        state.open_admin()

    state.login("admin", "admin123")
    assert state.is_admin
    assert state.api.me()["username"] == "admin"

    state.open_admin()
    assert state.view == ADMIN_VIEW

    state.logout()
    assert state.view == LIST_VIEW
    assert state.current_user is None


def test_bad_login_raises_api_error(state):
    with pytest.raises(ApiError) as excinfo:
        state.login("admin", "wrong")
    assert excinfo.value.status_code == 401
    assert state.current_user is None


def test_admin_article_crud_refreshes_list(state):
    state.search_query = "salvage"
    state.save_article(make_article("100", title="Salvage auctions"))
    assert ids(state.filtered_articles) == ["100"]

    state.save_article(make_article("100", title="Salvage auctions reopen"))
    assert state.filtered_articles[0]["title"] == "Salvage auctions reopen"

    state.open_article("100")
    state.delete_article("100")
    assert state.filtered_articles == []
    assert state.view == LIST_VIEW


def test_admin_media_helpers(state):
    image = state.upload_media("yard.png", io.BytesIO(b"png-bytes"), "image/png")
    video = state.upload_media("tour.mp4", io.BytesIO(b"mp4-bytes"), "video/mp4")

    assert set(ids(state.load_media())) == {image["id"], video["id"]}
    assert ids(state.media_of_kind("image")) == [image["id"]]
    assert ids(state.media_of_kind("video")) == [video["id"]]
    assert ids(state.search_media("YARD")) == [image["id"]]
    assert ids(state.search_media(video["id"])) == [video["id"]]

    state.update_media(image["id"], {"original_name": "yard-2.png", "alt_text": "Yard"})
    assert ids(state.search_media("yard-2")) == [image["id"]]

    state.delete_media(image["id"])
    assert ids(state.media) == [video["id"]]


def test_partial_media_update_keeps_cached_name(state):
    image = state.upload_media("yard.png", io.BytesIO(b"png-bytes"), "image/png")

    state.update_media(image["id"], {"alt_text": "Yard"})

    assert state.media[0]["original_name"] == "yard.png"
    assert state.media[0]["alt_text"] == "Yard"
    assert ids(state.search_media("yard")) == [image["id"]]


def test_rejected_upload_raises_api_error(state):
    with pytest.raises(ApiError) as excinfo:
        state.upload_media("notes.txt", io.BytesIO(b"text"), "text/plain")
    assert excinfo.value.status_code == 400
