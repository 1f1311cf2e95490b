from .criteria import (
    BlogFilterCriteria,
    ProjectFilterCriteria,
    clear_blog_filters,
    clear_project_filters,
    select_category,
    select_tag,
    toggle_category,
    toggle_technology,
    update_search,
)
from .engine import filter_blog_posts, filter_projects, normalize_search
from .options import (
    category_counts,
    distinct_categories,
    distinct_tags,
    distinct_technologies,
    sorted_options,
    tag_counts,
    technology_counts,
)

__all__ = [
    "BlogFilterCriteria",
    "ProjectFilterCriteria",
    "category_counts",
    "clear_blog_filters",
    "clear_project_filters",
    "distinct_categories",
    "distinct_tags",
    "distinct_technologies",
    "filter_blog_posts",
    "filter_projects",
    "normalize_search",
    "select_category",
    "select_tag",
    "sorted_options",
    "tag_counts",
    "technology_counts",
    "toggle_category",
    "toggle_technology",
    "update_search",
]
