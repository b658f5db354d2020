from .api import router
from .schemas import (
    LivenessDTO,
    CheckMessageDTO,
    CheckStatusDTO,
    CheckReportEntryDTO,
    CheckReportDTO,
    EnvironmentDTO,
)
from .dependencies import set_container, get_container

__all__ = [
    "router",
    "LivenessDTO",
    "CheckMessageDTO",
    "CheckStatusDTO",
    "CheckReportEntryDTO",
    "CheckReportDTO",
    "EnvironmentDTO",
    "set_container",
    "get_container",
]
