from __future__ import annotations

from pydantic import BaseModel, Field

from common.types.datetime import UtcDateTime


class Experience(BaseModel):
    """경력 타임라인 항목. current 이면 end_date 는 보통 비어 있다."""

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


class Education(BaseModel):
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


class Certification(BaseModel):
    id: str
    name: str
    issuer: str
    issue_date: UtcDateTime
    expiry_date: UtcDateTime | None = None
    credential_id: str | None = None
    credential_url: str | None = None
    description: str | None = None


class Skill(BaseModel):
    """proficiency 는 0~100 점수."""

    id: str
    name: str
    category: str
    proficiency: int = 0
    icon: str | None = None


class Resume(BaseModel):
    """이력서 화면 한 장에 필요한 네 섹션. 저장소를 못 쓰면 모두 빈 목록."""

    experiences: list[Experience] = Field(default_factory=list)
    education: list[Education] = Field(default_factory=list)
    certifications: list[Certification] = Field(default_factory=list)
    skills: list[Skill] = Field(default_factory=list)
