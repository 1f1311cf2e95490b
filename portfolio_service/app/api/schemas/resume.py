from __future__ import annotations

from pydantic import BaseModel, Field

from common.models.resume import Resume
from common.types.datetime import UtcDateTime


class ExperienceResponse(BaseModel):
    id: str
    title: str
    company: str
    location: str | None = None
    description: str = ""
    start_date: UtcDateTime
    end_date: UtcDateTime | None = None
    current: bool = False
    skills: list[str] = Field(default_factory=list)
    type: str | None = None


class EducationResponse(BaseModel):
    id: str
    institution: str
    degree: str
    field: str | None = None
    location: str | None = None
    start_date: UtcDateTime
    end_date: UtcDateTime | None = None
    current: bool = False
    description: str | None = None
    gpa: str | None = None


class CertificationResponse(BaseModel):
    id: str
    name: str
    issuer: str
    issue_date: UtcDateTime
    expiry_date: UtcDateTime | None = None
    credential_id: str | None = None
    credential_url: str | None = None
    description: str | None = None


class SkillResponse(BaseModel):
    id: str
    name: str
    category: str
    proficiency: int
    icon: str | None = None


class ResumeResponse(BaseModel):
    """이력서 응답 DTO. 섹션 순서는 저장소 정렬을 그대로 따른다."""

    experiences: list[ExperienceResponse]
    education: list[EducationResponse]
    certifications: list[CertificationResponse]
    skills: list[SkillResponse]

    @classmethod
    def from_domain(cls, resume: Resume) -> "ResumeResponse":
        return cls.model_validate(resume.model_dump())
