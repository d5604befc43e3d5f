"""Projects presentation layer, organized by aggregate.

Every endpoint requires an authenticated caller.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from auth.dependencies import get_current_user
from projects.presentation import collaborators, projects, tasks

router = APIRouter(dependencies=[Depends(get_current_user)])

router.include_router(projects.router)
router.include_router(collaborators.router)
router.include_router(tasks.router)

__all__ = ["router"]
