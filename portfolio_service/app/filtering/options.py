"""필터 선택 UI 에 채울 옵션 집합.

항상 전체 컬렉션에서 계산한다. 필터링된 결과에서 계산하면 카테고리 하나를
고르는 순간 다른 카테고리 칩이 사라진다.
"""

from __future__ import annotations

from collections import Counter
from typing import Iterable

from common.models.blog_post import BlogPostSummary
from common.models.project import ProjectSummary


def distinct_categories(items: Iterable[BlogPostSummary | ProjectSummary]) -> set[str]:
    return {item.category for item in items if item.category}


def distinct_tags(posts: Iterable[BlogPostSummary]) -> set[str]:
    return {tag for post in posts for tag in post.tags}


def distinct_technologies(projects: Iterable[ProjectSummary]) -> set[str]:
    return {tech for project in projects for tech in project.technologies}


def category_counts(
    items: Iterable[BlogPostSummary | ProjectSummary],
) -> dict[str, int]:
    """카테고리별 항목 수. 카테고리가 없는 항목은 세지 않는다."""

    return dict(Counter(item.category for item in items if item.category))


def tag_counts(posts: Iterable[BlogPostSummary]) -> dict[str, int]:
    # 한 글에 같은 태그가 중복 저장돼 있어도 글 하나로 센다.
    return dict(Counter(tag for post in posts for tag in set(post.tags)))


def technology_counts(projects: Iterable[ProjectSummary]) -> dict[str, int]:
    return dict(
        Counter(tech for project in projects for tech in set(project.technologies))
    )


def sorted_options(values: Iterable[str]) -> list[str]:
    """표시 순서: 이름(대소문자 무시) 기준, 같으면 원래 문자열 기준."""

    return sorted(values, key=lambda value: (value.casefold(), value))
