from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from app.services.sitemap_service import (
    SitemapService,
    get_sitemap_service,
    render_sitemap_xml,
)


router = APIRouter()


@router.get("/sitemap.xml", summary="sitemap", response_class=Response)
def sitemap(service: SitemapService = Depends(get_sitemap_service)) -> Response:
    body = render_sitemap_xml(service.build_entries())
    return Response(content=body, media_type="application/xml")
