"""HTTP client for the news REST API."""

import logging
from typing import Any, BinaryIO, Dict, List, Optional
import httpx

from recycling_news import config

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Non-2xx response from the API."""

    def __init__(self, status_code: int, message: str):
        super().__init__(f"{status_code}: {message}")
        self.status_code = status_code
        self.message = message


class ApiClient:
    """
    Thin wrapper over the REST routes.

    Pass an existing httpx.Client (for example a FastAPI TestClient) to
    reuse its transport; otherwise one is created for base_url.
    """

    def __init__(self, base_url: Optional[str] = None, client: Optional[httpx.Client] = None,
                 timeout: float = 10.0):
        self._owns_client = client is None
        self.http = client or httpx.Client(base_url=base_url or config.API_BASE_URL, timeout=timeout)
        self.user_id: Optional[str] = None

    def close(self):
        if self._owns_client:
            self.http.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def _request(self, method: str, path: str, **kwargs) -> Any:
        headers = kwargs.pop("headers", {})
        if self.user_id:
            headers["X-User-Id"] = self.user_id

        response = self.http.request(method, path, headers=headers, **kwargs)
        if response.is_error:
            try:
                message = response.json().get("detail", response.text)
            except ValueError:
                message = response.text
            logger.warning(f"{method} {path} failed: {response.status_code} {message}")
            raise ApiError(response.status_code, str(message))
        return response.json()

    # Categories
    def get_categories(self) -> List[Dict]:
        return self._request("GET", "/api/categories")

    def create_category(self, category: Dict) -> Dict:
        return self._request("POST", "/api/categories", json=category)

    # Articles
    def get_articles(self) -> List[Dict]:
        return self._request("GET", "/api/articles")

    def get_article(self, article_id: str) -> Dict:
        return self._request("GET", f"/api/articles/{article_id}")

    def create_article(self, article: Dict) -> Dict:
        return self._request("POST", "/api/articles", json=article)

    def update_article(self, article_id: str, fields: Dict) -> Dict:
        return self._request("PUT", f"/api/articles/{article_id}", json=fields)

    def delete_article(self, article_id: str) -> Dict:
        return self._request("DELETE", f"/api/articles/{article_id}")

    # Comments
    def get_comments(self, article_id: str) -> List[Dict]:
        return self._request("GET", f"/api/articles/{article_id}/comments")

    def add_comment(self, article_id: str, username: str, content: str,
                    user_id: Optional[str] = None) -> Dict:
        payload = {"username": username, "content": content, "user_id": user_id}
        return self._request("POST", f"/api/articles/{article_id}/comments", json=payload)

    def delete_comment(self, comment_id: str) -> Dict:
        return self._request("DELETE", f"/api/comments/{comment_id}")

    # Media
    def upload_media(self, filename: str, data: BinaryIO, mimetype: str) -> Dict:
        return self._request("POST", "/api/media/upload", files={"file": (filename, data, mimetype)})

    def get_media(self) -> List[Dict]:
        return self._request("GET", "/api/media")

    def update_media(self, media_id: str, fields: Dict) -> Dict:
        return self._request("PUT", f"/api/media/{media_id}", json=fields)

    def delete_media(self, media_id: str) -> Dict:
        return self._request("DELETE", f"/api/media/{media_id}")

    # Users
    def login(self, username: str, password: str) -> Dict:
        return self._request("POST", "/api/users/login", json={"username": username, "password": password})

    def register(self, username: str, email: str, password: str) -> Dict:
        payload = {"username": username, "email": email, "password": password}
        return self._request("POST", "/api/users/register", json=payload)

    def me(self) -> Dict:
        return self._request("GET", "/api/users/me")
