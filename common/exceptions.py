"""
Marketplace - Custom Exceptions
================================
Business-level exceptions raised inside services.
ErrorKind maps each error family to its HTTP status.
The service boundary (common.response.service_result) turns them into Failure results.
"""

import enum


class ErrorKind(str, enum.Enum):
    BAD_REQUEST = "BadRequest"
    NOT_FOUND = "NotFound"
    INTERNAL = "InternalError"

    @property
    def status_code(self) -> int:
        return _STATUS_BY_KIND[self]


_STATUS_BY_KIND = {
    ErrorKind.BAD_REQUEST: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.INTERNAL: 500,
}


class MarketplaceError(Exception):
    """Base exception for all business logic errors."""
    kind = ErrorKind.INTERNAL

    def __init__(self, message: str = "Error Internal Server", data=None):
        self.message = message
        self.data = data
        super().__init__(self.message)


class BadRequestError(MarketplaceError):
    """Raised for a missing/invalid field or a violated business rule."""
    kind = ErrorKind.BAD_REQUEST


class NotFoundError(MarketplaceError):
    """Raised when a requested resource doesn't exist."""
    kind = ErrorKind.NOT_FOUND


class ProductNotFoundError(NotFoundError):
    def __init__(self, product_code: str):
        super().__init__(f"Not found product with code: {product_code}")


class InsufficientStockError(BadRequestError):
    """Raised when product stock can't cover the requested quantity."""
    def __init__(self):
        super().__init__("There are not enough products in stock")


class ProductNotInCartError(BadRequestError):
    """Raised when removing a product that has no line in the cart."""
    def __init__(self):
        super().__init__("The product not exist in the shopping")


def require(value, field_name: str):
    """Raise BadRequestError when a required input is missing or blank."""
    if value is None or (isinstance(value, str) and not value.strip()):
        raise BadRequestError(f"{field_name} is required")
    return value
