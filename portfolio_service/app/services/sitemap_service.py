from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from xml.etree import ElementTree

from fastapi import Depends

from app.config import AppConfig, get_config
from app.services.blog_service import BlogService, get_blog_service
from app.services.projects_service import ProjectsService, get_projects_service
from common.types.datetime import ensure_utc

SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"

STATIC_PATHS = ("/", "/resume", "/projects", "/blog")


@dataclass(slots=True)
class SitemapEntry:
    url: str
    last_modified: datetime


class SitemapService:
    """정적 페이지 + 발행된 프로젝트/글 상세 페이지로 sitemap 을 만든다.

    저장소가 내려가 있으면 해당 항목만 빠진다. (각 서비스가 빈 목록을 돌려줌)
    """

    def __init__(
        self,
        base_url: str,
        blog_service: BlogService,
        projects_service: ProjectsService,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._blog_service = blog_service
        self._projects_service = projects_service

    def build_entries(self, now: datetime | None = None) -> list[SitemapEntry]:
        now = now or datetime.now(timezone.utc)

        entries = [
            SitemapEntry(url=f"{self._base_url}{path}", last_modified=now)
            for path in STATIC_PATHS
        ]

        for slug, updated_at in self._projects_service.list_published_slugs():
            entries.append(
                SitemapEntry(
                    url=f"{self._base_url}/projects/{slug}",
                    last_modified=updated_at or now,
                )
            )

        for post in self._blog_service.list_published_posts():
            entries.append(
                SitemapEntry(
                    url=f"{self._base_url}/blog/{post.slug}",
                    last_modified=post.published_at or now,
                )
            )

        return entries


def render_sitemap_xml(entries: list[SitemapEntry]) -> str:
    urlset = ElementTree.Element("urlset", xmlns=SITEMAP_NS)
    for entry in entries:
        url = ElementTree.SubElement(urlset, "url")
        ElementTree.SubElement(url, "loc").text = entry.url
        ElementTree.SubElement(url, "lastmod").text = ensure_utc(
            entry.last_modified
        ).isoformat()

    body = ElementTree.tostring(urlset, encoding="unicode")
    return f'<?xml version="1.0" encoding="UTF-8"?>\n{body}'


def get_sitemap_service(
    config: AppConfig = Depends(get_config),
    blog_service: BlogService = Depends(get_blog_service),
    projects_service: ProjectsService = Depends(get_projects_service),
) -> SitemapService:
    """FastAPI DI용 SitemapService 팩토리."""

    return SitemapService(config.site.base_url, blog_service, projects_service)
