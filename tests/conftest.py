import pytest
from fastapi.testclient import TestClient

from recycling_news.main import create_app


@pytest.fixture
def db_url(tmp_path):
    return f"sqlite:///{tmp_path / 'blog.db'}"


@pytest.fixture
def uploads_dir(tmp_path):
    return tmp_path / "uploads"


@pytest.fixture
def app(db_url, uploads_dir):
    return create_app(database_url=db_url, uploads_dir=str(uploads_dir))


@pytest.fixture
def client(app):
    # Entering the context runs the lifespan: tables + seed data
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def admin_headers(client):
    return {"X-User-Id": "1"}


def make_article(article_id, **overrides):
    article = {
        "id": article_id,
        "title": f"Article {article_id}",
        "slug": f"article-{article_id}",
        "excerpt": "Short excerpt",
        "content": "Body text",
        "image_url": None,
        "author": "Test Author",
        "category_id": "1",
        "published_date": "2025-03-01",
    }
    article.update(overrides)
    return article
