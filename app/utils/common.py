from typing import Any, Callable, Optional, TypeVar

from app.enums import ErrorCode
from app.exceptions import raise_not_found

T = TypeVar("T")

def get_object_or_404(
    lookup: Callable[[Any], Optional[T]],
    obj_id: Any,
    msg: str = "Object not found",
    error_code: ErrorCode = ErrorCode.NOT_FOUND,
) -> T:
    """
    Runs a store lookup by ID or raises a 404.
    """
    obj = lookup(obj_id)
    if obj is None:
        raise_not_found(msg, error_code)
    return obj
