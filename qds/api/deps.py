from typing import Optional, TypeVar

from qds.core.errors import NotFoundError

T = TypeVar("T")


def found_or_404(record: Optional[T], message: str) -> T:
    if record is None:
        raise NotFoundError(message)
    return record
