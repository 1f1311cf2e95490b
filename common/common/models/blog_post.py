from __future__ import annotations

from pydantic import BaseModel, Field

from common.types.datetime import UtcDateTime


class BlogPostSummary(BaseModel):
    """블로그 목록 카드용 요약 모델.

    필터링(검색/카테고리/태그)에 필요한 필드와 카드 렌더링 필드만 담는다.
    """

    id: str
    title: str
    slug: str
    excerpt: str | None = None
    author: str = ""
    published_at: UtcDateTime | None = None
    tags: list[str] = Field(default_factory=list)
    category: str | None = None
    featured_image: str | None = None
    views: int = 0


class BlogPostDetail(BlogPostSummary):
    """단일 글 상세 모델. content 는 MDX 원문이다."""

    content: str = ""
