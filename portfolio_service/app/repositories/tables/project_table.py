"""projects 테이블 ORM 모델"""

import uuid
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import JSON, Boolean, DateTime, Index, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from common.sql.database import Base


def _new_id() -> str:
    return uuid.uuid4().hex


def _now_utc() -> datetime:
    return datetime.now(timezone.utc)


class ProjectRow(Base):
    """포트폴리오 프로젝트

    technologies / images 는 PostgreSQL 과 SQLite 양쪽에서 동작하도록 JSON 배열로 둔다.
    """

    __tablename__ = "projects"

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=_new_id,
        comment="프로젝트 ID",
    )
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    slug: Mapped[str] = mapped_column(
        String(200),
        nullable=False,
        unique=True,
        comment="URL slug",
    )
    description: Mapped[str] = mapped_column(Text, nullable=False)
    long_description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    image: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    images: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    technologies: Mapped[list[str]] = mapped_column(
        JSON,
        nullable=False,
        default=list,
        comment="기술 스택 이름 목록",
    )
    category: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    featured: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    github_url: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    live_url: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    start_date: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    end_date: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    published: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    sort_order: Mapped[int] = mapped_column(
        "order",
        Integer,
        nullable=False,
        default=0,
        comment="같은 featured 그룹 안에서의 표시 순서 (오름차순)",
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=_now_utc,
        server_default=func.now(),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=_now_utc,
        onupdate=_now_utc,
        server_default=func.now(),
        nullable=False,
    )

    __table_args__ = (
        Index("ix_projects_published_listing", "published", "featured", "order"),
    )

    def __repr__(self) -> str:
        return f"<ProjectRow(id={self.id}, slug={self.slug}, published={self.published})>"
