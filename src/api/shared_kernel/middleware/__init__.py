"""HTTP-layer concerns shared by every bounded context's routes."""

from shared_kernel.middleware.validation import (
    install_validation_error_handler,
    request_validation_error_handler,
)

__all__ = [
    "install_validation_error_handler",
    "request_validation_error_handler",
]
