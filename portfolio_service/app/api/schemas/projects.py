from __future__ import annotations

from pydantic import BaseModel, Field

from common.models.project import ProjectDetail, ProjectSummary
from common.types.datetime import UtcDateTime


class ProjectResponse(BaseModel):
    """프로젝트 카드 응답 DTO."""

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

    @classmethod
    def from_domain(cls, project: ProjectSummary) -> "ProjectResponse":
        return cls.model_validate(project.model_dump())


class ProjectDetailResponse(ProjectResponse):
    long_description: str | None = None
    images: list[str] = Field(default_factory=list)
    start_date: UtcDateTime | None = None
    end_date: UtcDateTime | None = None

    @classmethod
    def from_domain(cls, project: ProjectDetail) -> "ProjectDetailResponse":  # type: ignore[override]
        return cls.model_validate(project.model_dump(exclude={"updated_at"}))


class ListProjectsResponse(BaseModel):
    total: int
    items: list[ProjectResponse]
