from datetime import datetime
from typing import List, Optional

from pydantic import Field

from app.enums import IssuePriority, IssueStatus, IssueType
from app.models.comment import CommentDetail
from app.models.common import CamelModel
from app.models.user import User


class Issue(CamelModel):
    id: str
    title: str
    description: str = ""
    status: IssueStatus = IssueStatus.TODO
    priority: IssuePriority = IssuePriority.MEDIUM
    type: IssueType = IssueType.TASK
    assignee_id: Optional[str] = None
    reporter_id: str
    project_id: str
    labels: List[str] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime


class IssueDetail(Issue):
    """Issue with its users and comments joined in."""
    assignee: Optional[User] = None
    reporter: Optional[User] = None
    comments: List[CommentDetail] = Field(default_factory=list)
