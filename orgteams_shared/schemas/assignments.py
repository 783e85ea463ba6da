"""Employee-to-team assignment schemas."""

from pydantic import BaseModel

from .common import CamelRequest, UTCDateTime


class AssignmentRequest(CamelRequest):
    """Body for both assign and unassign: ``{"employeeId": 1}``."""
    employee_id: int


class AssignmentRead(BaseModel):
    id: int
    employee_id: int
    team_id: int
    organisation_id: int
    assigned_at: UTCDateTime

    model_config = {"from_attributes": True}
