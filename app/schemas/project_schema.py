from app.models.common import CamelModel


class ProjectCreateRequest(CamelModel):
    name: str
    # Stored as sent; the client upper-cases and derives it from the name
    key: str
    description: str = ""
    lead_id: str
