from fastapi import APIRouter

from app.endpoints.v1 import auth_api, comments_api, issues_api, projects_api, users_api


def build_api_router(prefix: str) -> APIRouter:
    api_router = APIRouter(prefix=prefix)
    api_router.include_router(auth_api.router)
    api_router.include_router(users_api.router)
    api_router.include_router(projects_api.router)
    api_router.include_router(issues_api.router)
    api_router.include_router(comments_api.router)
    return api_router
