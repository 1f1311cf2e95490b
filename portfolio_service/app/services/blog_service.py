from __future__ import annotations

import logging

from fastapi import Depends
from pymongo.errors import PyMongoError

from app.filtering import BlogFilterCriteria, filter_blog_posts
from app.repositories.blog_post_repository import BlogPostRepository
from app.repositories.interfaces import BlogPostRepositoryInterface
from common.models.blog_post import BlogPostDetail, BlogPostSummary
from common.mongo.client import get_database

logger = logging.getLogger(__name__)


class BlogService:
    """블로그 글 조회 비즈니스 로직.

    - Repository 에만 의존하고, Mongo 세부 구현은 알지 않는다.
    - 저장소를 쓸 수 없으면(repo=None, 연결/쿼리 실패) 경고 로그를 남기고
      빈 목록(단건 조회는 None)을 돌려준다. 예외를 페이지까지 올리지 않는다.
    """

    def __init__(self, repo: BlogPostRepositoryInterface | None) -> None:
        self._repo = repo

    def list_published_posts(self) -> list[BlogPostSummary]:
        if self._repo is None:
            return []
        try:
            return self._repo.list_published()
        except PyMongoError as exc:
            logger.warning(
                "blog store not available, returning empty blog posts: %s",
                exc,
                extra={"store": "mongo"},
            )
            return []

    def list_posts(self, criteria: BlogFilterCriteria) -> list[BlogPostSummary]:
        """발행 글 전체를 읽은 뒤 필터 조건을 메모리에서 적용한다."""

        return filter_blog_posts(self.list_published_posts(), criteria)

    def get_post(self, slug: str) -> BlogPostDetail | None:
        if self._repo is None:
            return None
        try:
            return self._repo.find_published_by_slug(slug)
        except PyMongoError as exc:
            logger.warning(
                "blog store not available, cannot load post %s: %s",
                slug,
                exc,
                extra={"store": "mongo"},
            )
            return None


def get_blog_post_repository() -> BlogPostRepositoryInterface | None:
    """FastAPI DI용 BlogPostRepository 팩토리. 연결할 수 없으면 None."""

    try:
        return BlogPostRepository(get_database())
    except (RuntimeError, PyMongoError) as exc:
        logger.warning("MongoDB not available: %s", exc, extra={"store": "mongo"})
        return None


def get_blog_service(
    repo: BlogPostRepositoryInterface | None = Depends(get_blog_post_repository),
) -> BlogService:
    """FastAPI DI용 BlogService 팩토리."""

    return BlogService(repo)
