def test_comments_are_scoped_to_article_and_ordered(client):
    first = client.post("/api/articles/1/comments", json={"username": "ana", "content": "First"})
    second = client.post(
        "/api/articles/1/comments",
        json={"username": "ben", "content": "Second", "user_id": "1"},
    )
    client.post("/api/articles/2/comments", json={"username": "cy", "content": "Elsewhere"})

    assert first.status_code == 200
    assert first.json()["article_id"] == "1"
    assert first.json()["user_id"] is None
    assert second.json()["user_id"] == "1"

    comments = client.get("/api/articles/1/comments").json()
    assert [c["content"] for c in comments] == ["First", "Second"]


def test_comment_on_missing_article_is_404(client):
    response = client.post("/api/articles/nope/comments", json={"username": "ana", "content": "Hi"})
    assert response.status_code == 404


def test_blank_comment_rejected(client):
    response = client.post("/api/articles/1/comments", json={"username": "ana", "content": "  "})
    assert response.status_code == 422


def test_delete_comment_by_id(client):
    comment = client.post("/api/articles/1/comments", json={"username": "ana", "content": "Bye"}).json()

    response = client.delete(f"/api/comments/{comment['id']}")
    assert response.status_code == 200
    assert client.get("/api/articles/1/comments").json() == []

    assert client.delete(f"/api/comments/{comment['id']}").status_code == 404
