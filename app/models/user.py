from typing import Optional

from app.models.common import CamelModel


class User(CamelModel):
    """Public view of a user. Never carries the credential."""
    id: str
    name: str
    email: str
    avatar: Optional[str] = None


class UserCredentials(User):
    """Stored user record, including the plaintext password."""
    password: str

    def public(self) -> User:
        return User.model_validate(self.model_dump(exclude={"password"}))
