from fastapi import APIRouter

from .blog import router as blog_router
from .filters import router as filters_router
from .projects import router as projects_router
from .resume import router as resume_router

api_router = APIRouter()
api_router.include_router(blog_router, prefix="/blog", tags=["blog"])
api_router.include_router(projects_router, prefix="/projects", tags=["projects"])
api_router.include_router(filters_router, prefix="/filters", tags=["filters"])
api_router.include_router(resume_router, prefix="/resume", tags=["resume"])
