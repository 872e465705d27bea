from typing import List

from fastapi import APIRouter, Depends

from app.constants import ErrorMessages
from app.database.session import get_store
from app.database.store import Store
from app.enums import ErrorCode
from app.exceptions import raise_project_not_found
from app.models import Project, ProjectDetail, ProjectStats
from app.schemas.project_schema import ProjectCreateRequest
from app.utils.common import get_object_or_404

router = APIRouter(prefix="/projects", tags=["Projects"])

@router.get("", response_model=List[ProjectStats])
def get_all_projects(store: Store = Depends(get_store)):
    """
    Lists projects with their lead and issue counts per board column.
    """
    return store.project_stats()

@router.post("", response_model=Project, status_code=201)
def create_project(project_data: ProjectCreateRequest, store: Store = Depends(get_store)):
    """
    Creates a project. The lead is not checked against existing users.
    """
    return store.create_project(
        name=project_data.name,
        key=project_data.key,
        description=project_data.description,
        lead_id=project_data.lead_id,
    )

@router.get("/{project_id}", response_model=ProjectDetail)
def get_project(project_id: str, store: Store = Depends(get_store)):
    return get_object_or_404(
        store.get_project, project_id, ErrorMessages.PROJECT_NOT_FOUND, ErrorCode.PROJECT_NOT_FOUND
    )

@router.delete("/{project_id}")
def delete_project(project_id: str, store: Store = Depends(get_store)):
    """
    Deletes a project together with its issues and their comments.
    """
    if not store.delete_project(project_id):
        raise_project_not_found()
    return {"success": True}
