"""
Marketplace - Service Results & Response Envelope
==================================================
Every public service operation returns exactly one of Ok / Failure.
Routes render either one as the uniform envelope {status, message, data}.
"""

import functools
import logging
from dataclasses import dataclass
from typing import Any, Union

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from common.exceptions import ErrorKind, MarketplaceError

logger = logging.getLogger("marketplace.service")

INTERNAL_ERROR_MESSAGE = "Error Internal Server"


@dataclass(frozen=True)
class Ok:
    message: str
    data: Any = None

    ok = True
    status_code = 200


@dataclass(frozen=True)
class Failure:
    kind: ErrorKind
    message: str
    data: Any = None

    ok = False

    @property
    def status_code(self) -> int:
        return self.kind.status_code


Result = Union[Ok, Failure]


def service_result(commit: bool = False):
    """
    Boundary for a public service method taking (self, db, ...).

    Business errors keep their kind and message; anything else is logged and
    downgraded to InternalError with the error text attached as data.
    With commit=True the session is committed on Ok and rolled back on Failure.
    """
    def decorator(func):
        @functools.wraps(func)
        def wrapper(self, db, *args, **kwargs) -> Result:
            try:
                result = func(self, db, *args, **kwargs)
                if commit:
                    db.commit()
                return result
            except MarketplaceError as e:
                if commit:
                    db.rollback()
                return Failure(e.kind, e.message, e.data)
            except Exception as e:
                if commit:
                    db.rollback()
                logger.exception(f"{func.__qualname__} failed")
                return Failure(ErrorKind.INTERNAL, INTERNAL_ERROR_MESSAGE, str(e))
        return wrapper
    return decorator


def envelope(status_code: int, message: str, data: Any = None) -> JSONResponse:
    """Build the {status, message, data} JSON response."""
    body = {"status": status_code, "message": message}
    if data is not None:
        body["data"] = jsonable_encoder(data)
    return JSONResponse(body, status_code=status_code)


def to_response(result: Result) -> JSONResponse:
    return envelope(result.status_code, result.message, result.data)
