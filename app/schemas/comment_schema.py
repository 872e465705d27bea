from pydantic import Field

from app.models.common import CamelModel


class CommentCreateRequest(CamelModel):
    user_id: str
    content: str = Field(min_length=1)
