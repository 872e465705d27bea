from typing import List

from fastapi import APIRouter, Depends

from app.database.session import get_store
from app.database.store import Store
from app.exceptions import raise_issue_not_found
from app.models import Comment, CommentDetail
from app.schemas.comment_schema import CommentCreateRequest

router = APIRouter(prefix="/issues", tags=["Comments"])

@router.get("/{issue_id}/comments", response_model=List[CommentDetail])
def get_issue_comments(issue_id: str, store: Store = Depends(get_store)):
    """
    Comments on an issue, oldest first, each with its author.
    """
    if not store.get_issue(issue_id):
        raise_issue_not_found()
    return store.list_comments_for_issue(issue_id)

@router.post("/{issue_id}/comments", response_model=Comment, status_code=201)
def create_comment(issue_id: str, comment_data: CommentCreateRequest, store: Store = Depends(get_store)):
    """
    Adds a comment and bumps the issue's updatedAt.
    """
    if not store.get_issue(issue_id):
        raise_issue_not_found()
    return store.create_comment(issue_id, comment_data.user_id, comment_data.content)
