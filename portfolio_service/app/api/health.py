from __future__ import annotations

from fastapi import APIRouter


router = APIRouter()


@router.get("/health", summary="헬스 체크")
async def health() -> dict[str, str]:
    # 저장소 상태와 무관하게 프로세스가 살아 있으면 ok (저장소 장애는 빈 목록으로 흡수)
    return {"status": "ok", "service": "portfolio-service"}
