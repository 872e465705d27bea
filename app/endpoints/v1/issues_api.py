from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, Query
from pydantic import ValidationError

from app.constants import ErrorMessages
from app.database.session import get_store
from app.database.store import Store
from app.enums import ErrorCode, IssuePriority, IssueStatus, IssueType
from app.exceptions import StoreError, raise_internal_error, raise_issue_not_found
from app.models import Issue, IssueDetail
from app.schemas.issue_schema import IssueCreateRequest, IssueUpdateRequest
from app.utils.common import get_object_or_404
from app.utils.logger import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/issues", tags=["Issues"])

@router.get("", response_model=List[IssueDetail])
def get_issues(
    project_id: Optional[str] = Query(None, alias="projectId"),
    search: Optional[str] = None,
    status: Optional[IssueStatus] = None,
    priority: Optional[IssuePriority] = None,
    issue_type: Optional[IssueType] = Query(None, alias="type"),
    store: Store = Depends(get_store)
):
    """
    Lists issues with users and comments joined in.
    Optional filters: projectId, search (title, description or id), status, priority, type.
    """
    return store.list_issues(
        project_id,
        search=search,
        status=status,
        priority=priority,
        issue_type=issue_type,
    )

@router.post("", response_model=Issue, status_code=201)
def create_issue(issue_data: Dict[str, Any] = Body(...), store: Store = Depends(get_store)):
    """
    Creates an issue. Any failure, an invalid body included, answers
    500 "Failed to create issue".
    """
    try:
        request = IssueCreateRequest.model_validate(issue_data)
        return store.create_issue(request.model_dump())
    except (ValidationError, StoreError) as e:
        logger.warning(f"Issue creation failed: {e}")
        raise_internal_error(ErrorMessages.CREATE_ISSUE_FAILED)

@router.get("/board", response_model=Dict[IssueStatus, List[IssueDetail]])
def get_board(
    project_id: Optional[str] = Query(None, alias="projectId"),
    store: Store = Depends(get_store)
):
    """
    Issues grouped by status column: todo, in-progress, done.
    """
    return store.board(project_id)

@router.get("/{issue_id}", response_model=IssueDetail)
def get_issue(issue_id: str, store: Store = Depends(get_store)):
    return get_object_or_404(store.get_issue, issue_id, ErrorMessages.ISSUE_NOT_FOUND, ErrorCode.ISSUE_NOT_FOUND)

@router.put("/{issue_id}", response_model=IssueDetail)
def update_issue(issue_id: str, issue_data: IssueUpdateRequest, store: Store = Depends(get_store)):
    """
    Applies the fields present in the body. Moving a card between board
    columns is an update of status only.
    """
    issue = store.update_issue(issue_id, issue_data.to_updates())
    if not issue:
        raise_issue_not_found()
    return issue

@router.delete("/{issue_id}")
def delete_issue(issue_id: str, store: Store = Depends(get_store)):
    if not store.delete_issue(issue_id):
        raise_issue_not_found()
    return {"success": True}
