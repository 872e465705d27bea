from fastapi import Request

from app.config.settings import Settings
from app.database.seed import seed_store
from app.database.store import Store
from app.utils.logger import get_logger

logger = get_logger(__name__)


def create_store(settings: Settings) -> Store:
    """
    Build the process-wide store.
    Called once from the application factory; the result lives on app.state.
    """
    store = Store(avatar_base_url=settings.AVATAR_BASE_URL)
    if settings.SEED_DATA:
        seed_store(store)
    else:
        logger.info("SEED_DATA disabled, starting with an empty store")
    return store


def get_store(request: Request) -> Store:
    """
    Store dependency.
    Hands each request the store created at application startup.
    """
    return request.app.state.store
