from __future__ import annotations

from pydantic import Field, field_validator

from common.mongo.types import BaseDocument
from common.types.datetime import UtcDateTime


class BlogPostDocument(BaseDocument):
    """MongoDB blogposts 컬렉션 도큐먼트 모델.

    mongoose 스키마가 만든 camelCase 필드명을 alias 로 받는다.
    목록 조회는 content 를 projection 에서 제외하므로 content 는 선택 필드다.
    """

    title: str
    slug: str
    content: str | None = None
    excerpt: str | None = None
    author: str = ""
    published: bool = False
    published_at: UtcDateTime | None = Field(default=None, alias="publishedAt")
    tags: list[str] = Field(default_factory=list)
    category: str | None = None
    featured_image: str | None = Field(default=None, alias="featuredImage")
    views: int = 0

    @field_validator("tags", mode="before")
    @classmethod
    def _tags_as_list(cls, value: object) -> object:
        # 스키마 도입 전 도큐먼트에는 tags 가 null 이거나 없을 수 있다.
        if value is None:
            return []
        return value

    @field_validator("views", mode="before")
    @classmethod
    def _views_as_int(cls, value: object) -> object:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return 0
        return int(value)
