from __future__ import annotations

from pydantic import BaseModel, Field

from common.types.datetime import UtcDateTime


class ProjectSummary(BaseModel):
    """프로젝트 그리드 카드용 요약 모델."""

    id: str
    title: str
    slug: str
    description: str
    image: str | None = None
    technologies: list[str] = Field(default_factory=list)
    category: str | None = None
    featured: bool = False
    github_url: str | None = None
    live_url: str | None = None


class ProjectDetail(ProjectSummary):
    """프로젝트 상세 모델"""

    long_description: str | None = None
    images: list[str] = Field(default_factory=list)
    start_date: UtcDateTime | None = None
    end_date: UtcDateTime | None = None
    updated_at: UtcDateTime | None = None
