from typing import Any, Dict, List, Optional

from pydantic import Field, field_validator

from app.enums import IssuePriority, IssueStatus, IssueType
from app.models.common import CamelModel


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and value.strip() in ("", "null", "undefined"):
        return None
    return value


class IssueCreateRequest(CamelModel):
    """Issue fields without id and timestamps. Unknown keys are ignored."""
    title: str = Field(min_length=1)
    description: str = ""
    status: IssueStatus = IssueStatus.TODO
    priority: IssuePriority = IssuePriority.MEDIUM
    type: IssueType = IssueType.TASK
    assignee_id: Optional[str] = None
    reporter_id: str
    project_id: str
    labels: List[str] = Field(default_factory=list)

    @field_validator("assignee_id", mode="before")
    @classmethod
    def clean_assignee(cls, value):
        return _blank_to_none(value)


class IssueUpdateRequest(CamelModel):
    """
    Partial issue update.
    The board sends the whole hydrated issue back with a new status, so id,
    createdAt, updatedAt and the joined assignee/reporter/comments are
    accepted and dropped.
    """
    title: Optional[str] = None
    description: Optional[str] = None
    status: Optional[IssueStatus] = None
    priority: Optional[IssuePriority] = None
    type: Optional[IssueType] = None
    assignee_id: Optional[str] = None
    reporter_id: Optional[str] = None
    project_id: Optional[str] = None
    labels: Optional[List[str]] = None

    @field_validator("assignee_id", mode="before")
    @classmethod
    def clean_assignee(cls, value):
        return _blank_to_none(value)

    def to_updates(self) -> Dict[str, Any]:
        """
        Fields the client actually sent.
        A null clears assignee_id; on any other field it means "leave as is".
        """
        updates = self.model_dump(exclude_unset=True)
        return {
            field: value for field, value in updates.items()
            if value is not None or field == "assignee_id"
        }
