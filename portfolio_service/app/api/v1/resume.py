from __future__ import annotations

from fastapi import APIRouter, Depends

from app.api.schemas.resume import ResumeResponse
from app.services.resume_service import ResumeService, get_resume_service


router = APIRouter()


@router.get(
    "",
    response_model=ResumeResponse,
    summary="이력서 조회",
    description=(
        "경력/학력/자격증/기술 네 섹션을 반환한다. 저장소를 쓸 수 없으면 "
        "모든 섹션이 빈 목록이다."
    ),
)
def get_resume(
    service: ResumeService = Depends(get_resume_service),
) -> ResumeResponse:
    return ResumeResponse.from_domain(service.get_resume())
