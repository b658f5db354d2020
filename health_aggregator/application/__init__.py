from .use_cases import (
    ReportHealthUseCase,
    LivenessProbeUseCase,
    EnvironmentInfoUseCase,
)

__all__ = [
    "ReportHealthUseCase",
    "LivenessProbeUseCase",
    "EnvironmentInfoUseCase",
]
