from pydantic import BaseModel, Field, RootModel
from typing import Any, Dict, List, Literal, Optional


class LivenessDTO(BaseModel):
    """DTO for the liveness probe response."""
    status: Literal["ok"] = "ok"


class CheckMessageDTO(BaseModel):
    """A single error entry attached to a failed check."""
    type: Literal["error"] = "error"
    message: Any


class CheckStatusDTO(BaseModel):
    """Status record of a single check, keyed by the check name in the report."""
    status: Literal["ok", "error"]
    message: Optional[List[CheckMessageDTO]] = None


class CheckReportEntryDTO(BaseModel):
    """
    One entry of the report document.

    The check's status record sits under the check's own name, next to the
    ``time`` key, e.g. ``{"db": {"status": "ok"}, "time": 0.42}``.
    """
    model_config = {"extra": "allow"}

    time: float = Field(..., ge=0, description="Elapsed time of the check in milliseconds")


class CheckReportDTO(RootModel[List[CheckReportEntryDTO]]):
    """The full report: one entry per check, in registration order."""


class ApplicationInfoDTO(BaseModel):
    name: str
    version: str
    environment: str


class EnvironmentDTO(BaseModel):
    """DTO for runtime environment metadata."""
    application: ApplicationInfoDTO
    stack: Dict[str, str]
    platform: Dict[str, str]
