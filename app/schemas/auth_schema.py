from app.models.common import CamelModel


class SigninRequest(CamelModel):
    email: str
    password: str


class SignupRequest(CamelModel):
    name: str
    email: str
    password: str
