from __future__ import annotations

from fastapi import Depends

from app.filtering import (
    category_counts,
    sorted_options,
    tag_counts,
    technology_counts,
)
from app.services.blog_service import BlogService, get_blog_service
from app.services.projects_service import ProjectsService, get_projects_service


def _as_sorted_items(counts: dict[str, int]) -> list[tuple[str, int]]:
    return [(name, counts[name]) for name in sorted_options(counts)]


class FiltersService:
    """목록 화면 필터 옵션(이름, 개수) 조회 비즈니스 로직.

    옵션은 항상 발행된 전체 컬렉션에서 계산한다. 현재 선택된 필터와 무관하므로
    카테고리를 골라도 다른 카테고리 옵션이 사라지지 않는다.
    """

    def __init__(
        self, blog_service: BlogService, projects_service: ProjectsService
    ) -> None:
        self._blog_service = blog_service
        self._projects_service = projects_service

    def get_blog_filters(
        self,
    ) -> tuple[list[tuple[str, int]], list[tuple[str, int]]]:
        """(카테고리 목록, 태그 목록) 을 반환한다."""
        posts = self._blog_service.list_published_posts()
        return (
            _as_sorted_items(category_counts(posts)),
            _as_sorted_items(tag_counts(posts)),
        )

    def get_project_filters(
        self,
    ) -> tuple[list[tuple[str, int]], list[tuple[str, int]]]:
        """(카테고리 목록, 기술 목록) 을 반환한다."""
        projects = self._projects_service.list_published_projects()
        return (
            _as_sorted_items(category_counts(projects)),
            _as_sorted_items(technology_counts(projects)),
        )


def get_filters_service(
    blog_service: BlogService = Depends(get_blog_service),
    projects_service: ProjectsService = Depends(get_projects_service),
) -> FiltersService:
    """FastAPI DI용 FiltersService 팩토리"""
    return FiltersService(blog_service, projects_service)
