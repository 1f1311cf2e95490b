"""블로그 글 / 프로젝트 목록의 메모리 내 필터링.

두 필터 모두 조건별 predicate 의 AND 이며, 입력 순서를 유지한 부분 리스트를 새로
만들어 반환한다. 선택적 필드가 비어 있으면 해당 predicate 에서 "불일치" 로 본다.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from common.models.blog_post import BlogPostSummary
from common.models.project import ProjectSummary

from .criteria import BlogFilterCriteria, ProjectFilterCriteria


def normalize_search(text: str) -> str:
    """검색어 비교 기준: 앞뒤 공백 제거 + 소문자."""

    return text.strip().lower()


def matches_category(
    item: BlogPostSummary | ProjectSummary, selected: str | None
) -> bool:
    # 카테고리는 대소문자까지 정확히 일치해야 한다.
    return selected is None or item.category == selected


def matches_tag(post: BlogPostSummary, selected: str | None) -> bool:
    return selected is None or selected in post.tags


def matches_technologies(project: ProjectSummary, selected: Iterable[str]) -> bool:
    """선택된 기술 중 하나라도 가지고 있으면 통과 (OR)."""

    selected = frozenset(selected)
    if not selected:
        return True
    return not selected.isdisjoint(project.technologies)


def matches_blog_search(post: BlogPostSummary, query: str) -> bool:
    """query 는 normalize_search 를 거친 값이어야 한다."""

    if not query:
        return True
    if query in post.title.lower():
        return True
    return post.excerpt is not None and query in post.excerpt.lower()


def matches_project_search(project: ProjectSummary, query: str) -> bool:
    """제목, 설명, 기술 이름 중 하나에 부분 문자열로 포함되면 통과."""

    if not query:
        return True
    if query in project.title.lower() or query in project.description.lower():
        return True
    return any(query in tech.lower() for tech in project.technologies)


def filter_blog_posts(
    posts: Sequence[BlogPostSummary], criteria: BlogFilterCriteria
) -> list[BlogPostSummary]:
    query = normalize_search(criteria.search_text)

    return [
        post
        for post in posts
        if matches_blog_search(post, query)
        and matches_category(post, criteria.selected_category)
        and matches_tag(post, criteria.selected_tag)
    ]


def filter_projects(
    projects: Sequence[ProjectSummary], criteria: ProjectFilterCriteria
) -> list[ProjectSummary]:
    query = normalize_search(criteria.search_text)

    return [
        project
        for project in projects
        if matches_category(project, criteria.selected_category)
        and matches_technologies(project, criteria.selected_technologies)
        and matches_project_search(project, query)
    ]
