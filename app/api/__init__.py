"""
API router.

Routes under /auth are open; every other route requires a bearer token and is
scoped to the organisation named in it.
"""

from fastapi import APIRouter

from orgteams_shared.schemas.common import ErrorResponse

from . import assignments, auth, employees, teams

router = APIRouter(
    responses={status: {"model": ErrorResponse} for status in (400, 401, 404, 500)},
)

router.include_router(auth.router, prefix="/auth", tags=["Authentication"])
router.include_router(employees.router, prefix="/employees", tags=["Employees"])
router.include_router(teams.router, prefix="/teams", tags=["Teams"])
router.include_router(assignments.router, tags=["Assignments"])
