from __future__ import annotations

from pymongo import DESCENDING
from pymongo.database import Database

from app.repositories.documents.blog_post_document import BlogPostDocument
from app.repositories.interfaces import BlogPostRepositoryInterface
from common.models.blog_post import BlogPostDetail, BlogPostSummary
from common.mongo.client import BLOG_POSTS_COLLECTION
from common.mongo.types import from_object_id


# 목록 카드에 필요한 필드만 읽는다. (content 제외)
SUMMARY_PROJECTION = {
    "title": 1,
    "slug": 1,
    "excerpt": 1,
    "author": 1,
    "publishedAt": 1,
    "tags": 1,
    "category": 1,
    "featuredImage": 1,
    "views": 1,
    "createdAt": 1,
}

DETAIL_PROJECTION = {**SUMMARY_PROJECTION, "content": 1}

PUBLISHED_SORT = [("publishedAt", DESCENDING), ("createdAt", DESCENDING)]


class BlogPostRepository(BlogPostRepositoryInterface):
    """blogposts 컬렉션에 대한 MongoDB 접근 레이어. 조회 전용."""

    def __init__(self, database: Database) -> None:
        """Mongo Database를 의존성으로 받고, blogposts 컬렉션을 내부에서 선택한다."""

        self._db = database
        self._col = database[BLOG_POSTS_COLLECTION]

    # --- helpers -----------------------------------------------------------------
    @staticmethod
    def _to_summary(raw: dict) -> BlogPostSummary:
        doc = BlogPostDocument.model_validate(raw)
        return BlogPostSummary(
            id=from_object_id(doc.id) or "",
            title=doc.title,
            slug=doc.slug,
            excerpt=doc.excerpt,
            author=doc.author,
            published_at=doc.published_at,
            tags=doc.tags,
            category=doc.category,
            featured_image=doc.featured_image,
            views=doc.views,
        )

    @classmethod
    def _to_detail(cls, raw: dict) -> BlogPostDetail:
        summary = cls._to_summary(raw)
        return BlogPostDetail(
            **summary.model_dump(),
            content=raw.get("content") or "",
        )

    # --- queries -----------------------------------------------------------------
    def list_published(self) -> list[BlogPostSummary]:
        cursor = self._col.find(
            {"published": True},
            SUMMARY_PROJECTION,
            sort=PUBLISHED_SORT,
        )
        return [self._to_summary(raw) for raw in cursor]

    def find_published_by_slug(self, slug: str) -> BlogPostDetail | None:
        raw = self._col.find_one({"slug": slug, "published": True}, DETAIL_PROJECTION)
        if not raw:
            return None
        return self._to_detail(raw)
