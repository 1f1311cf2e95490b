from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from app.api.schemas.projects import (
    ListProjectsResponse,
    ProjectDetailResponse,
    ProjectResponse,
)
from app.filtering import ProjectFilterCriteria
from app.services.projects_service import ProjectsService, get_projects_service


router = APIRouter()


@router.get(
    "",
    response_model=ListProjectsResponse,
    summary="프로젝트 목록 조회",
    description=(
        "발행된 프로젝트를 featured 우선으로 반환한다. 기술 목록은 OR 조건이다 "
        "(선택한 기술 중 하나라도 쓰면 포함)."
    ),
)
def list_projects(
    search: str = Query(
        "",
        description="제목/설명/기술 이름에 대한 부분 일치 검색어 (대소문자 무시)",
    ),
    category: Optional[str] = Query(
        default=None,
        description="카테고리 (정확 일치)",
    ),
    technologies: List[str] = Query(
        default=[],
        description="기술 목록으로 필터링 (OR)",
    ),
    service: ProjectsService = Depends(get_projects_service),
) -> ListProjectsResponse:
    criteria = ProjectFilterCriteria(
        search_text=search,
        selected_category=category,
        selected_technologies=frozenset(technologies),
    )
    items = service.list_projects(criteria)
    dto_items = [ProjectResponse.from_domain(project) for project in items]
    return ListProjectsResponse(total=len(dto_items), items=dto_items)


@router.get(
    "/{slug}",
    response_model=ProjectDetailResponse,
    summary="프로젝트 상세 조회",
    description="slug 로 발행된 프로젝트 하나를 조회한다.",
)
def get_project(
    slug: str,
    service: ProjectsService = Depends(get_projects_service),
) -> ProjectDetailResponse:
    project = service.get_project(slug)
    if project is None:
        raise HTTPException(status_code=404, detail="project not found")
    return ProjectDetailResponse.from_domain(project)
