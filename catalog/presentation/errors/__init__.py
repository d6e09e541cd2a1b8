"""RFC 9457 error responses."""

from catalog.presentation.errors.exception_handlers import register_exception_handlers
from catalog.presentation.errors.problem_details import ErrorDetail, ProblemDetails

__all__ = ["ErrorDetail", "ProblemDetails", "register_exception_handlers"]
