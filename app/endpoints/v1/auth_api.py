from fastapi import APIRouter, Depends

from app.database.session import get_store
from app.database.store import Store
from app.exceptions import raise_email_exists, raise_unauthorized
from app.models import User
from app.schemas.auth_schema import SigninRequest, SignupRequest
from app.utils.logger import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/auth", tags=["Auth"])

@router.post("/signin", response_model=User)
def signin(credentials: SigninRequest, store: Store = Depends(get_store)):
    """
    Checks email and password.
    Returns the user without its credential, or 401.
    """
    user = store.authenticate(credentials.email, credentials.password)
    if not user:
        logger.info(f"Rejected sign-in for {credentials.email}")
        raise_unauthorized()
    return user

@router.post("/signup", response_model=User, status_code=201)
def signup(signup_data: SignupRequest, store: Store = Depends(get_store)):
    """
    Registers a new user. The email must not be taken yet.
    """
    if store.find_user_by_email(signup_data.email):
        raise_email_exists()
    return store.create_user(signup_data.name, signup_data.email, signup_data.password)
