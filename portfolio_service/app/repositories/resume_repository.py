"""이력서 테이블 조회 리포지토리"""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.repositories.interfaces import ResumeRepositoryInterface
from app.repositories.tables.resume_tables import (
    CertificationRow,
    EducationRow,
    ExperienceRow,
    SkillRow,
)
from common.models.resume import Certification, Education, Experience, Skill


# 현재 재직/재학 중인 항목 먼저, 그다음 최근 시작 순, 같으면 order 오름차순
EXPERIENCE_ORDER = (
    ExperienceRow.current.desc(),
    ExperienceRow.start_date.desc(),
    ExperienceRow.sort_order.asc(),
)

EDUCATION_ORDER = (
    EducationRow.current.desc(),
    EducationRow.start_date.desc(),
    EducationRow.sort_order.asc(),
)

CERTIFICATION_ORDER = (
    CertificationRow.issue_date.desc(),
    CertificationRow.sort_order.asc(),
)

# 카테고리별로 묶어 보여주므로 카테고리가 첫 정렬 키
SKILL_ORDER = (
    SkillRow.category.asc(),
    SkillRow.sort_order.asc(),
    SkillRow.proficiency.desc(),
)


class ResumeRepository(ResumeRepositoryInterface):
    """이력서 네 섹션 테이블 접근 레이어. 조회 전용."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_experiences(self) -> list[Experience]:
        rows = self.session.scalars(select(ExperienceRow).order_by(*EXPERIENCE_ORDER))
        return [
            Experience(
                id=row.id,
                title=row.title,
                company=row.company,
                location=row.location,
                description=row.description or "",
                start_date=row.start_date,
                end_date=row.end_date,
                current=row.current,
                skills=list(row.skills or []),
                type=row.type,
            )
            for row in rows
        ]

    def list_education(self) -> list[Education]:
        rows = self.session.scalars(select(EducationRow).order_by(*EDUCATION_ORDER))
        return [
            Education(
                id=row.id,
                institution=row.institution,
                degree=row.degree,
                field=row.field,
                location=row.location,
                start_date=row.start_date,
                end_date=row.end_date,
                current=row.current,
                description=row.description,
                gpa=row.gpa,
            )
            for row in rows
        ]

    def list_certifications(self) -> list[Certification]:
        rows = self.session.scalars(
            select(CertificationRow).order_by(*CERTIFICATION_ORDER)
        )
        return [
            Certification(
                id=row.id,
                name=row.name,
                issuer=row.issuer,
                issue_date=row.issue_date,
                expiry_date=row.expiry_date,
                credential_id=row.credential_id,
                credential_url=row.credential_url,
                description=row.description,
            )
            for row in rows
        ]

    def list_skills(self) -> list[Skill]:
        rows = self.session.scalars(select(SkillRow).order_by(*SKILL_ORDER))
        return [
            Skill(
                id=row.id,
                name=row.name,
                category=row.category,
                proficiency=row.proficiency,
                icon=row.icon,
            )
            for row in rows
        ]
