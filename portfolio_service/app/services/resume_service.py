from __future__ import annotations

import logging
from typing import Iterator

from fastapi import Depends
from sqlalchemy.exc import SQLAlchemyError

from app.repositories.interfaces import ResumeRepositoryInterface
from app.repositories.resume_repository import ResumeRepository
from common.models.resume import Resume
from common.sql.database import get_session_factory

logger = logging.getLogger(__name__)


class ResumeService:
    """이력서 조회 비즈니스 로직.

    네 섹션을 한 번에 읽는다. 하나라도 실패하면 일부만 보여주지 않고
    모든 섹션을 빈 목록으로 돌려준다.
    """

    def __init__(self, repo: ResumeRepositoryInterface | None) -> None:
        self._repo = repo

    def get_resume(self) -> Resume:
        if self._repo is None:
            return Resume()
        try:
            return Resume(
                experiences=self._repo.list_experiences(),
                education=self._repo.list_education(),
                certifications=self._repo.list_certifications(),
                skills=self._repo.list_skills(),
            )
        except SQLAlchemyError as exc:
            logger.warning(
                "resume store not available, returning empty resume data: %s",
                exc,
                extra={"store": "sql"},
            )
            return Resume()


def get_resume_repository() -> Iterator[ResumeRepositoryInterface | None]:
    """FastAPI DI용 ResumeRepository 팩토리. 요청마다 세션을 열고 닫는다."""

    try:
        session_factory = get_session_factory()
    except (RuntimeError, SQLAlchemyError) as exc:
        logger.warning("resume store not configured: %s", exc, extra={"store": "sql"})
        yield None
        return

    with session_factory() as session:
        yield ResumeRepository(session)


def get_resume_service(
    repo: ResumeRepositoryInterface | None = Depends(get_resume_repository),
) -> ResumeService:
    """FastAPI DI용 ResumeService 팩토리."""

    return ResumeService(repo)
