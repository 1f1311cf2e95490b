from __future__ import annotations

from pydantic import BaseModel, Field

from common.models.blog_post import BlogPostDetail, BlogPostSummary
from common.types.datetime import UtcDateTime


class BlogPostResponse(BaseModel):
    """블로그 글 카드 응답 DTO."""

    id: str
    title: str
    slug: str
    excerpt: str | None = None
    author: str
    published_at: UtcDateTime | None = None
    tags: list[str] = Field(default_factory=list)
    category: str | None = None
    featured_image: str | None = None
    views: int = 0

    @classmethod
    def from_domain(cls, post: BlogPostSummary) -> "BlogPostResponse":
        return cls.model_validate(post.model_dump())


class BlogPostDetailResponse(BlogPostResponse):
    """블로그 글 상세 응답 DTO. content 는 MDX 원문 그대로 내려준다."""

    content: str

    @classmethod
    def from_domain(cls, post: BlogPostDetail) -> "BlogPostDetailResponse":  # type: ignore[override]
        return cls.model_validate(post.model_dump())


class ListBlogPostsResponse(BaseModel):
    total: int
    items: list[BlogPostResponse]
