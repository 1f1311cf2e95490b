from __future__ import annotations

from datetime import datetime
from typing import Protocol

from common.models.blog_post import BlogPostDetail, BlogPostSummary
from common.models.project import ProjectDetail, ProjectSummary
from common.models.resume import Certification, Education, Experience, Skill


class BlogPostRepositoryInterface(Protocol):
    """블로그 글 저장소가 따라야 할 최소한의 계약.

    Service 레이어는 이 인터페이스에만 의존하고, 구체 구현(Mongo 등)은 몰라도 된다.
    """

    def list_published(self) -> list[BlogPostSummary]:  # pragma: no cover - Protocol
        """발행된 글 요약 목록 (최신순)"""
        ...

    def find_published_by_slug(
        self, slug: str
    ) -> BlogPostDetail | None:  # pragma: no cover - Protocol
        ...


class ProjectRepositoryInterface(Protocol):
    """프로젝트 저장소가 따라야 할 최소한의 계약."""

    def list_published(self) -> list[ProjectSummary]:  # pragma: no cover - Protocol
        """발행된 프로젝트 요약 목록 (featured 우선, order, 최신순)"""
        ...

    def find_published_by_slug(
        self, slug: str
    ) -> ProjectDetail | None:  # pragma: no cover - Protocol
        ...

    def list_published_slugs(
        self,
    ) -> list[tuple[str, datetime | None]]:  # pragma: no cover - Protocol
        """sitemap 용 (slug, updated_at) 목록"""
        ...


class ResumeRepositoryInterface(Protocol):
    """이력서 저장소 계약. 섹션마다 화면에 보여줄 순서로 정렬해서 돌려준다."""

    def list_experiences(self) -> list[Experience]:  # pragma: no cover - Protocol
        ...

    def list_education(self) -> list[Education]:  # pragma: no cover - Protocol
        ...

    def list_certifications(self) -> list[Certification]:  # pragma: no cover - Protocol
        ...

    def list_skills(self) -> list[Skill]:  # pragma: no cover - Protocol
        ...
