"""
Storage Error Translation

Every database call made by repositories and the page assembler runs inside
storage_errors():

- IntegrityError (unique/foreign key violation) → ConflictError (409)
- Any other SQLAlchemyError or connection OSError → StorageUnavailableError (503)

The driver's message is logged but never put in the raised exception, so raw
storage text never reaches a client.
"""

from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from taproom.shared.core.exceptions import ConflictError, StorageUnavailableError
from taproom.shared.core.logging import get_logger


log = get_logger("taproom.storage")


@contextmanager
def storage_errors(operation: str) -> Iterator[None]:
    """
    Translate database exceptions into catalog exceptions.

    Args:
        operation: Short label for logs, e.g. "beers.create"

    Raises:
        ConflictError: constraint violation
        StorageUnavailableError: any other database failure
    """
    try:
        yield
    except IntegrityError as e:
        log.warning("Constraint violation", operation=operation, error=str(e.orig))
        raise ConflictError("The resource conflicts with an existing one") from e
    except (SQLAlchemyError, OSError) as e:
        log.error(
            "Storage failure",
            operation=operation,
            error_type=type(e).__name__,
            error=str(e),
        )
        raise StorageUnavailableError() from e
