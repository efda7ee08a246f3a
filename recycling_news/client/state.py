"""In-memory application state for the news reader and admin dashboard."""

import logging
from typing import BinaryIO, Dict, List, Optional

from recycling_news.client.api import ApiClient, ApiError
from recycling_news.renderer import render_content
from recycling_news.uploads import media_kind

logger = logging.getLogger(__name__)

LIST_VIEW = "list"
DETAIL_VIEW = "detail"
ADMIN_VIEW = "admin"

UNKNOWN_CATEGORY = "Unknown"


def filter_articles(articles: List[Dict], category_id: Optional[str], query: str) -> List[Dict]:
    """
    Category equality AND a case-insensitive substring match of the query
    in title, excerpt or content.
    """
    filtered = list(articles)

    if category_id:
        filtered = [a for a in filtered if a.get("category_id") == category_id]

    if query and query.strip():
        needle = query.lower()
        filtered = [
            a for a in filtered
            if needle in (a.get("title") or "").lower()
            or needle in (a.get("excerpt") or "").lower()
            or needle in (a.get("content") or "").lower()
        ]

    return filtered


def search_media(media: List[Dict], term: str) -> List[Dict]:
    """Media whose original name or id contains term, case-insensitively."""
    needle = (term or "").lower()
    return [
        m for m in media
        if needle in (m.get("original_name") or "").lower()
        or needle in (m.get("id") or "").lower()
    ]


def media_of_kind(media: List[Dict], kind: str) -> List[Dict]:
    """Media whose MIME type is an image or a video, for the media picker."""
    return [m for m in media if media_kind(m.get("mimetype")) == kind]


class NewsState:
    """
    Holds every article and category and derives the filtered list view.

    The filtered view is recomputed as soon as the articles, the selected
    category or the search query change.
    """

    def __init__(self, api: ApiClient):
        self.api = api
        self.categories: List[Dict] = []
        self._articles: List[Dict] = []
        self._selected_category: Optional[str] = None
        self._search_query = ""
        self.filtered_articles: List[Dict] = []

        self.view = LIST_VIEW
        self.selected_article: Optional[Dict] = None
        self.current_user: Optional[Dict] = None
        self.media: List[Dict] = []

    # Derived list view
    def _refilter(self):
        self.filtered_articles = filter_articles(
            self._articles, self._selected_category, self._search_query
        )

    @property
    def articles(self) -> List[Dict]:
        return self._articles

    @articles.setter
    def articles(self, value: List[Dict]):
        self._articles = list(value)
        self._refilter()

    @property
    def selected_category(self) -> Optional[str]:
        return self._selected_category

    @selected_category.setter
    def selected_category(self, category_id: Optional[str]):
        self._selected_category = category_id
        self._refilter()

    @property
    def search_query(self) -> str:
        return self._search_query

    @search_query.setter
    def search_query(self, query: str):
        self._search_query = query or ""
        self._refilter()

    def load(self):
        """Fetch all articles and categories; on failure keep what was loaded."""
        try:
            articles = self.api.get_articles()
            categories = self.api.get_categories()
        except ApiError as e:
            logger.error(f"Error fetching data: {e}")
            return
        self.categories = categories
        self.articles = articles
        logger.info(f"Loaded {len(articles)} articles in {len(categories)} categories")

    def category_name(self, article: Dict) -> str:
        category = article.get("category")
        if category and category.get("name"):
            return category["name"]
        return UNKNOWN_CATEGORY

    # Views
    def open_article(self, article_id: str) -> Dict:
        """Switch to the detail view for an already loaded article."""
        article = next((a for a in self._articles if a["id"] == article_id), None)
        if article is None:
            raise KeyError(article_id)
        self.selected_article = article
        self.view = DETAIL_VIEW
        return article

    @property
    def detail_html(self) -> str:
        if not self.selected_article:
            return ""
        return render_content(self.selected_article.get("content", ""))

    def back_to_list(self):
        self.selected_article = None
        self.view = LIST_VIEW

    def open_admin(self):
        if not self.is_admin:
            raise PermissionError("Admin role required")
        self.selected_article = None
        self.view = ADMIN_VIEW

    def close_admin(self):
        """Leave the dashboard and reload so edits show up in the list."""
        self.view = LIST_VIEW
        self.load()

    # Session
    @property
    def is_admin(self) -> bool:
        return bool(self.current_user) and self.current_user.get("role") == "admin"

    def login(self, username: str, password: str) -> Dict:
        user = self.api.login(username, password)
        self._set_user(user)
        return user

    def register(self, username: str, email: str, password: str) -> Dict:
        user = self.api.register(username, email, password)
        self._set_user(user)
        return user

    def _set_user(self, user: Dict):
        self.current_user = user
        self.api.user_id = user["id"]
        logger.info(f"Signed in as {user['username']} ({user['role']})")

    def logout(self):
        self.current_user = None
        self.api.user_id = None
        if self.view == ADMIN_VIEW:
            self.view = LIST_VIEW

    # Admin: articles
    def save_article(self, article: Dict) -> Dict:
        """Create the article, or update it when its id is already loaded."""
        fields = dict(article)
        article_id = fields["id"]
        if any(a["id"] == article_id for a in self._articles):
            fields.pop("id")
            result = self.api.update_article(article_id, fields)
        else:
            result = self.api.create_article(fields)
        self.articles = self.api.get_articles()
        return result

    def delete_article(self, article_id: str):
        self.api.delete_article(article_id)
        self.articles = [a for a in self._articles if a["id"] != article_id]
        if self.selected_article and self.selected_article["id"] == article_id:
            self.back_to_list()

    # Admin: media
    def load_media(self) -> List[Dict]:
        self.media = self.api.get_media()
        return self.media

    def upload_media(self, filename: str, data: BinaryIO, mimetype: str) -> Dict:
        item = self.api.upload_media(filename, data, mimetype)
        self.media = [item] + self.media
        return item

    def update_media(self, media_id: str, fields: Dict) -> Dict:
        """Save the edit and merge it into the cached record."""
        result = self.api.update_media(media_id, fields)
        # a null the caller did not send must not blank a cached field
        changes = {k: v for k, v in result.items() if k in fields or v is not None}
        self.media = [
            {**m, **changes} if m["id"] == media_id else m
            for m in self.media
        ]
        return result

    def delete_media(self, media_id: str):
        self.api.delete_media(media_id)
        self.media = [m for m in self.media if m["id"] != media_id]

    def search_media(self, term: str) -> List[Dict]:
        return search_media(self.media, term)

    def media_of_kind(self, kind: str) -> List[Dict]:
        return media_of_kind(self.media, kind)
