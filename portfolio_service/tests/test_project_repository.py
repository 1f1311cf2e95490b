from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Iterator

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session

from app.repositories.project_repository import ProjectRepository
from app.repositories.tables.project_table import ProjectRow
from common.sql.database import Base


BASE_TIME = datetime(2024, 1, 1, tzinfo=timezone.utc)


def _build_row(
    slug: str,
    *,
    published: bool = True,
    featured: bool = False,
    sort_order: int = 0,
    created_offset_days: int = 0,
    technologies: list[str] | None = None,
    category: str | None = None,
) -> ProjectRow:
    created_at = BASE_TIME + timedelta(days=created_offset_days)
    return ProjectRow(
        title=slug.replace("-", " ").title(),
        slug=slug,
        description=f"{slug} description",
        long_description=f"{slug} long description",
        technologies=technologies or [],
        images=[f"https://img.example.com/{slug}.png"],
        category=category,
        featured=featured,
        published=published,
        sort_order=sort_order,
        created_at=created_at,
        updated_at=created_at,
    )


@pytest.fixture
def session() -> Iterator[Session]:
    engine = create_engine("sqlite://")
    Base.metadata.create_all(engine)
    with Session(engine) as session:
        session.add_all(
            [
                _build_row("old-side-project", created_offset_days=0),
                _build_row("new-side-project", created_offset_days=5),
                _build_row("ordered-second", sort_order=2, created_offset_days=9),
                _build_row(
                    "flagship",
                    featured=True,
                    sort_order=3,
                    technologies=["React", "TypeScript"],
                    category="Web App",
                ),
                _build_row("draft", published=False, featured=True),
            ]
        )
        session.commit()
        yield session
    engine.dispose()


def test_list_published_orders_featured_then_order_then_newest(session: Session) -> None:
    repo = ProjectRepository(session)

    slugs = [project.slug for project in repo.list_published()]

    assert slugs == [
        "flagship",
        "new-side-project",
        "old-side-project",
        "ordered-second",
    ]


def test_list_published_maps_summary_fields(session: Session) -> None:
    repo = ProjectRepository(session)

    flagship = repo.list_published()[0]

    assert flagship.technologies == ["React", "TypeScript"]
    assert flagship.category == "Web App"
    assert flagship.featured is True
    assert flagship.github_url is None


def test_find_published_by_slug_returns_detail(session: Session) -> None:
    repo = ProjectRepository(session)

    project = repo.find_published_by_slug("flagship")

    assert project is not None
    assert project.long_description == "flagship long description"
    assert project.images == ["https://img.example.com/flagship.png"]
    # SQLite 는 tz 를 저장하지 않지만 도메인 모델에서는 UTC 로 맞춰진다.
    assert project.updated_at == BASE_TIME


def test_find_published_by_slug_hides_drafts_and_missing(session: Session) -> None:
    repo = ProjectRepository(session)

    assert repo.find_published_by_slug("draft") is None
    assert repo.find_published_by_slug("missing") is None


def test_list_published_slugs_excludes_drafts(session: Session) -> None:
    repo = ProjectRepository(session)

    slugs = dict(repo.list_published_slugs())

    assert "draft" not in slugs
    assert set(slugs) == {
        "flagship",
        "new-side-project",
        "old-side-project",
        "ordered-second",
    }
