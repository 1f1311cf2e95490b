"""projects 테이블 조회 리포지토리"""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.repositories.interfaces import ProjectRepositoryInterface
from app.repositories.tables.project_table import ProjectRow
from common.models.project import ProjectDetail, ProjectSummary


# featured 먼저, 그 안에서 order 오름차순, 같으면 최근 생성 순
PUBLISHED_ORDER = (
    ProjectRow.featured.desc(),
    ProjectRow.sort_order.asc(),
    ProjectRow.created_at.desc(),
)


class ProjectRepository(ProjectRepositoryInterface):
    """관계형 DB 의 projects 테이블 접근 레이어. 조회 전용."""

    def __init__(self, session: Session) -> None:
        self.session = session

    @staticmethod
    def _to_summary(row: ProjectRow) -> ProjectSummary:
        return ProjectSummary(
            id=row.id,
            title=row.title,
            slug=row.slug,
            description=row.description,
            image=row.image,
            technologies=list(row.technologies or []),
            category=row.category,
            featured=row.featured,
            github_url=row.github_url,
            live_url=row.live_url,
        )

    @classmethod
    def _to_detail(cls, row: ProjectRow) -> ProjectDetail:
        return ProjectDetail(
            **cls._to_summary(row).model_dump(),
            long_description=row.long_description,
            images=list(row.images or []),
            start_date=row.start_date,
            end_date=row.end_date,
            updated_at=row.updated_at,
        )

    def list_published(self) -> list[ProjectSummary]:
        query = (
            select(ProjectRow)
            .where(ProjectRow.published.is_(True))
            .order_by(*PUBLISHED_ORDER)
        )
        rows = self.session.scalars(query).all()
        return [self._to_summary(row) for row in rows]

    def find_published_by_slug(self, slug: str) -> ProjectDetail | None:
        """slug 로 조회한다. 존재하지만 미발행이면 None."""

        row = self.session.scalars(
            select(ProjectRow).where(ProjectRow.slug == slug)
        ).one_or_none()
        if row is None or not row.published:
            return None
        return self._to_detail(row)

    def list_published_slugs(self) -> list[tuple[str, datetime | None]]:
        query = (
            select(ProjectRow.slug, ProjectRow.updated_at)
            .where(ProjectRow.published.is_(True))
            .order_by(*PUBLISHED_ORDER)
        )
        return [(slug, updated_at) for slug, updated_at in self.session.execute(query)]
