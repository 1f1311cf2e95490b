from __future__ import annotations

from pydantic import BaseModel, Field


class FilterItem(BaseModel):
    """필터 옵션 항목 (카테고리/태그/기술)"""

    name: str = Field(..., description="필터 이름")
    count: int = Field(..., description="해당 값을 가진 항목 개수")


class BlogFiltersResponse(BaseModel):
    """블로그 목록 필터 옵션"""

    categories: list[FilterItem] = Field(default_factory=list, description="카테고리 목록")
    tags: list[FilterItem] = Field(default_factory=list, description="태그 목록")


class ProjectFiltersResponse(BaseModel):
    """프로젝트 목록 필터 옵션"""

    categories: list[FilterItem] = Field(default_factory=list, description="카테고리 목록")
    technologies: list[FilterItem] = Field(
        default_factory=list, description="기술 목록"
    )
