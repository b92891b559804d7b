from .models import (
    ActionResult,
    DashboardSummary,
    Expense,
    ProductOption,
    Sale,
    Session,
)
from .errors import (
    AppError,
    ApplicationError,
    AuthenticationError,
    ParseError,
    TransportError,
    ValidationError,
)

__all__ = [
    "ActionResult",
    "DashboardSummary",
    "Expense",
    "ProductOption",
    "Sale",
    "Session",
    "AppError",
    "ApplicationError",
    "AuthenticationError",
    "ParseError",
    "TransportError",
    "ValidationError",
]
