from __future__ import annotations

import logging
from datetime import datetime
from typing import Iterator

from fastapi import Depends
from sqlalchemy.exc import SQLAlchemyError

from app.filtering import ProjectFilterCriteria, filter_projects
from app.repositories.interfaces import ProjectRepositoryInterface
from app.repositories.project_repository import ProjectRepository
from common.models.project import ProjectDetail, ProjectSummary
from common.sql.database import get_session_factory

logger = logging.getLogger(__name__)


class ProjectsService:
    """프로젝트 조회 비즈니스 로직. 저장소 장애 시 BlogService 와 같은 규칙으로 빈 결과."""

    def __init__(self, repo: ProjectRepositoryInterface | None) -> None:
        self._repo = repo

    def list_published_projects(self) -> list[ProjectSummary]:
        if self._repo is None:
            return []
        try:
            return self._repo.list_published()
        except SQLAlchemyError as exc:
            logger.warning(
                "project store not available, returning empty projects: %s",
                exc,
                extra={"store": "sql"},
            )
            return []

    def list_projects(self, criteria: ProjectFilterCriteria) -> list[ProjectSummary]:
        return filter_projects(self.list_published_projects(), criteria)

    def get_project(self, slug: str) -> ProjectDetail | None:
        if self._repo is None:
            return None
        try:
            return self._repo.find_published_by_slug(slug)
        except SQLAlchemyError as exc:
            logger.warning(
                "project store not available, cannot load project %s: %s",
                slug,
                exc,
                extra={"store": "sql"},
            )
            return None

    def list_published_slugs(self) -> list[tuple[str, datetime | None]]:
        if self._repo is None:
            return []
        try:
            return self._repo.list_published_slugs()
        except SQLAlchemyError as exc:
            logger.warning(
                "project store not available for sitemap entries: %s",
                exc,
                extra={"store": "sql"},
            )
            return []


def get_project_repository() -> Iterator[ProjectRepositoryInterface | None]:
    """FastAPI DI용 ProjectRepository 팩토리. 요청마다 세션을 열고 닫는다."""

    try:
        session_factory = get_session_factory()
    except (RuntimeError, SQLAlchemyError) as exc:
        logger.warning("project store not configured: %s", exc, extra={"store": "sql"})
        yield None
        return

    with session_factory() as session:
        yield ProjectRepository(session)


def get_projects_service(
    repo: ProjectRepositoryInterface | None = Depends(get_project_repository),
) -> ProjectsService:
    """FastAPI DI용 ProjectsService 팩토리."""

    return ProjectsService(repo)
