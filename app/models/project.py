from datetime import datetime
from typing import Optional

from app.models.common import CamelModel
from app.models.user import User


class Project(CamelModel):
    id: str
    key: str
    name: str
    description: str = ""
    lead_id: str
    created_at: datetime


class ProjectDetail(Project):
    # Resolved from lead_id at read time; absent when the user is gone
    lead: Optional[User] = None


class ProjectStats(ProjectDetail):
    issue_count: int = 0
    todo_count: int = 0
    in_progress_count: int = 0
    done_count: int = 0
