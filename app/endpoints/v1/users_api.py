from typing import List

from fastapi import APIRouter, Depends

from app.constants import ErrorMessages
from app.database.session import get_store
from app.database.store import Store
from app.enums import ErrorCode
from app.models import User
from app.utils.common import get_object_or_404

router = APIRouter(prefix="/users", tags=["Users"])

@router.get("", response_model=List[User])
def get_all_users(store: Store = Depends(get_store)):
    """
    Lists every user. Credentials are never included.
    """
    return store.list_users()

@router.get("/{user_id}", response_model=User)
def get_user(user_id: str, store: Store = Depends(get_store)):
    return get_object_or_404(store.get_user, user_id, ErrorMessages.USER_NOT_FOUND, ErrorCode.USER_NOT_FOUND)
