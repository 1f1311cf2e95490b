from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from app.api.schemas.blog import (
    BlogPostDetailResponse,
    BlogPostResponse,
    ListBlogPostsResponse,
)
from app.filtering import BlogFilterCriteria
from app.services.blog_service import BlogService, get_blog_service


router = APIRouter()


@router.get(
    "/posts",
    response_model=ListBlogPostsResponse,
    summary="블로그 글 목록 조회",
    description=(
        "발행된 블로그 글을 최신순으로 반환한다. 검색어/카테고리/태그가 주어지면 "
        "모두 만족하는 글만 남긴다."
    ),
)
def list_posts(
    search: str = Query(
        "",
        description="제목/요약에 대한 부분 일치 검색어 (대소문자 무시)",
    ),
    category: Optional[str] = Query(
        default=None,
        description="카테고리 (정확 일치). 'all' 또는 생략 시 필터 없음",
    ),
    tag: Optional[str] = Query(
        default=None,
        description="태그 (정확 일치). 'all' 또는 생략 시 필터 없음",
    ),
    service: BlogService = Depends(get_blog_service),
) -> ListBlogPostsResponse:
    criteria = BlogFilterCriteria(
        search_text=search,
        selected_category=category,
        selected_tag=tag,
    )
    items = service.list_posts(criteria)
    dto_items = [BlogPostResponse.from_domain(post) for post in items]
    return ListBlogPostsResponse(total=len(dto_items), items=dto_items)


@router.get(
    "/posts/{slug}",
    response_model=BlogPostDetailResponse,
    summary="블로그 글 상세 조회",
    description="slug 로 발행된 글 하나를 본문과 함께 조회한다.",
)
def get_post(
    slug: str,
    service: BlogService = Depends(get_blog_service),
) -> BlogPostDetailResponse:
    post = service.get_post(slug)
    if post is None:
        raise HTTPException(status_code=404, detail="post not found")
    return BlogPostDetailResponse.from_domain(post)
