from __future__ import annotations

from fastapi import APIRouter, Depends

from app.api.schemas.filters import (
    BlogFiltersResponse,
    FilterItem,
    ProjectFiltersResponse,
)
from app.services.filters_service import FiltersService, get_filters_service


router = APIRouter()


@router.get(
    "/blog",
    response_model=BlogFiltersResponse,
    summary="블로그 필터 옵션 조회",
    description="발행된 전체 글 기준의 카테고리/태그 목록과 각 글 개수를 반환한다.",
)
def get_blog_filters(
    service: FiltersService = Depends(get_filters_service),
) -> BlogFiltersResponse:
    categories, tags = service.get_blog_filters()
    return BlogFiltersResponse(
        categories=[FilterItem(name=name, count=count) for name, count in categories],
        tags=[FilterItem(name=name, count=count) for name, count in tags],
    )


@router.get(
    "/projects",
    response_model=ProjectFiltersResponse,
    summary="프로젝트 필터 옵션 조회",
    description="발행된 전체 프로젝트 기준의 카테고리/기술 목록과 각 개수를 반환한다.",
)
def get_project_filters(
    service: FiltersService = Depends(get_filters_service),
) -> ProjectFiltersResponse:
    categories, technologies = service.get_project_filters()
    return ProjectFiltersResponse(
        categories=[FilterItem(name=name, count=count) for name, count in categories],
        technologies=[
            FilterItem(name=name, count=count) for name, count in technologies
        ],
    )
