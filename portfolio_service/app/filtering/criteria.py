"""목록 화면 필터 조건과 상태 전이 함수.

필터 조건은 불변 값 객체이고, 사용자 입력(검색어 입력, 칩 클릭, 초기화)은
모두 ``Criteria -> Criteria`` 순수 함수로 표현한다. 원본 컬렉션은 건드리지 않는다.

단일 선택 조건의 "필터 없음" 은 블로그/프로젝트 모두 ``None`` 으로 통일한다.
예전 블로그 화면이 쓰던 ``"all"`` 과 빈 문자열은 입력 시 ``None`` 으로 바꾼다.
그래서 이름이 정확히 ``"all"`` 인 카테고리나 태그는 선택할 수 없다.
기술 목록에서는 빈 문자열 항목만 버린다.
"""

from __future__ import annotations

from typing import TypeVar

from pydantic import BaseModel, ConfigDict, field_validator


ALL_SENTINEL = "all"


def normalize_selection(value: str | None) -> str | None:
    """단일 선택 값을 정규화한다. ``"all"`` / ``""`` / ``None`` 은 선택 해제."""

    if value is None or value == "" or value == ALL_SENTINEL:
        return None
    return value


class BlogFilterCriteria(BaseModel):
    """블로그 목록 필터 조건"""

    model_config = ConfigDict(frozen=True)

    search_text: str = ""
    selected_category: str | None = None
    selected_tag: str | None = None

    @field_validator("selected_category", "selected_tag", mode="before")
    @classmethod
    def _normalize_selection(cls, value: str | None) -> str | None:
        return normalize_selection(value)

    @property
    def has_active_filters(self) -> bool:
        return (
            bool(self.search_text.strip())
            or self.selected_category is not None
            or self.selected_tag is not None
        )


class ProjectFilterCriteria(BaseModel):
    """프로젝트 목록 필터 조건. 기술은 여러 개를 동시에 선택할 수 있다."""

    model_config = ConfigDict(frozen=True)

    search_text: str = ""
    selected_category: str | None = None
    selected_technologies: frozenset[str] = frozenset()

    @field_validator("selected_category", mode="before")
    @classmethod
    def _normalize_selection(cls, value: str | None) -> str | None:
        return normalize_selection(value)

    @field_validator("selected_technologies", mode="before")
    @classmethod
    def _drop_blank_technologies(cls, value: object) -> object:
        if value is None:
            return frozenset()
        if isinstance(value, (list, tuple, set, frozenset)):
            return frozenset(tech for tech in value if tech)
        return value

    @property
    def has_active_filters(self) -> bool:
        return (
            bool(self.search_text.strip())
            or self.selected_category is not None
            or bool(self.selected_technologies)
        )


Criteria = TypeVar("Criteria", BlogFilterCriteria, ProjectFilterCriteria)


# model_copy(update=...) 는 validator 를 거치지 않으므로 선택 값은 여기서 정규화한다.


def update_search(criteria: Criteria, text: str) -> Criteria:
    return criteria.model_copy(update={"search_text": text})


def select_category(criteria: Criteria, category: str | None) -> Criteria:
    return criteria.model_copy(
        update={"selected_category": normalize_selection(category)}
    )


def select_tag(criteria: BlogFilterCriteria, tag: str | None) -> BlogFilterCriteria:
    return criteria.model_copy(update={"selected_tag": normalize_selection(tag)})


def toggle_category(criteria: Criteria, category: str) -> Criteria:
    """이미 선택된 카테고리를 다시 누르면 해제, 아니면 그 카테고리만 선택한다."""

    if criteria.selected_category == category:
        return criteria.model_copy(update={"selected_category": None})
    return select_category(criteria, category)


def toggle_technology(
    criteria: ProjectFilterCriteria, tech: str
) -> ProjectFilterCriteria:
    """선택된 기술이면 빼고, 아니면 추가한다. 두 번 적용하면 원래대로 돌아온다."""

    selected = criteria.selected_technologies
    if tech in selected:
        updated = selected - {tech}
    else:
        updated = selected | {tech}
    return criteria.model_copy(update={"selected_technologies": frozenset(updated)})


def clear_blog_filters() -> BlogFilterCriteria:
    return BlogFilterCriteria()


def clear_project_filters() -> ProjectFilterCriteria:
    return ProjectFilterCriteria()
