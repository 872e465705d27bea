from datetime import datetime
from typing import Optional

from app.models.common import CamelModel
from app.models.user import User


class Comment(CamelModel):
    id: str
    issue_id: str
    user_id: str
    content: str
    created_at: datetime


class CommentDetail(Comment):
    user: Optional[User] = None
