from conftest import make_article


def test_list_articles_newest_first_with_nested_category(client):
    response = client.get("/api/articles")
    assert response.status_code == 200

    articles = response.json()
    dates = [a["published_date"] for a in articles]
    assert dates == sorted(dates, reverse=True)

    first = articles[0]
    assert first["id"] == "1"
    assert first["category"]["id"] == "1"
    assert first["category"]["name"] == "Industry News"


def test_get_missing_article_returns_404(client):
    response = client.get("/api/articles/does-not-exist")
    assert response.status_code == 404
    assert response.json()["detail"] == "Article not found"


def test_create_then_get_round_trip(client):
    article = make_article("100", image_url="http://x/cover.png", category_id="2")

    created = client.post("/api/articles", json=article)
    assert created.status_code == 200
    assert created.json() == article

    fetched = client.get("/api/articles/100").json()
    for field, value in article.items():
        assert fetched[field] == value
    assert fetched["category"]["slug"] == "technology"
    assert fetched["created_at"]
    assert fetched["updated_at"]


def test_create_with_duplicate_slug_is_a_store_error(client):
    client.post("/api/articles", json=make_article("100"))
    response = client.post("/api/articles", json=make_article("101", slug="article-100"))

    assert response.status_code == 500
    assert response.json()["detail"] == "Failed to create article"
    assert client.get("/api/articles/101").status_code == 404


def test_create_requires_fields(client):
    article = make_article("100")
    del article["title"]
    assert client.post("/api/articles", json=article).status_code == 422


def test_dangling_category_id_yields_null_category(client):
    client.post("/api/articles", json=make_article("100", category_id="no-such-category"))

    fetched = client.get("/api/articles/100").json()
    assert fetched["category_id"] == "no-such-category"
    assert fetched["category"] is None


def test_article_without_category(client):
    client.post("/api/articles", json=make_article("100", category_id=None))
    assert client.get("/api/articles/100").json()["category"] is None


def test_update_overwrites_given_fields_and_bumps_updated_at(client):
    client.post("/api/articles", json=make_article("100"))
    before = client.get("/api/articles/100").json()

    response = client.put("/api/articles/100", json={"title": "Renamed", "category_id": "3"})
    assert response.status_code == 200
    assert response.json() == {"id": "100", "title": "Renamed", "category_id": "3"}

    after = client.get("/api/articles/100").json()
    assert after["title"] == "Renamed"
    assert after["category"]["name"] == "Sustainability"
    assert after["excerpt"] == before["excerpt"]
    assert after["updated_at"] >= before["updated_at"]


def test_delete_reports_success_for_existing_and_missing(client):
    client.post("/api/articles", json=make_article("100"))

    existing = client.delete("/api/articles/100")
    missing = client.delete("/api/articles/100")

    assert existing.status_code == missing.status_code == 200
    assert existing.json() == missing.json() == {"message": "Article deleted"}
    assert client.get("/api/articles/100").status_code == 404


def test_delete_article_removes_its_comments(client, app):
    from recycling_news.models import Comment

    client.post("/api/articles", json=make_article("100"))
    client.post("/api/articles/100/comments", json={"username": "reader", "content": "Nice"})
    client.post("/api/articles/1/comments", json={"username": "reader", "content": "Keep me"})

    client.delete("/api/articles/100")

    db = app.state.store.session()
    try:
        remaining = db.query(Comment).all()
        assert [c.article_id for c in remaining] == ["1"]
    finally:
        db.close()


def test_categories_listed_by_name_and_created_with_caller_id(client):
    names = [c["name"] for c in client.get("/api/categories").json()]
    assert names == sorted(names)

    payload = {"id": "42", "name": "Auctions", "slug": "auctions"}
    response = client.post("/api/categories", json=payload)
    assert response.status_code == 200
    assert response.json() == payload

    slugs = [c["slug"] for c in client.get("/api/categories").json()]
    assert "auctions" in slugs


def test_duplicate_category_slug_fails(client):
    response = client.post("/api/categories", json={"id": "42", "name": "Dup", "slug": "technology"})
    assert response.status_code == 500
