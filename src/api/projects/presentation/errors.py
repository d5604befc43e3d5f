"""Mapping of guard rejections to HTTP errors."""

from fastapi import HTTPException, status

from shared_kernel.authorization import AccessDeniedError, ResourceNotFoundError


def guard_http_error(error: ResourceNotFoundError | AccessDeniedError) -> HTTPException:
    """404 for a missing project, 403 for a caller who does not own it."""
    if isinstance(error, ResourceNotFoundError):
        return HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Project {error.resource_id} not found",
        )
    return HTTPException(
        status_code=status.HTTP_403_FORBIDDEN,
        detail="Only the project owner can perform this operation",
    )
