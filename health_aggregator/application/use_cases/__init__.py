from .report_health import ReportHealthUseCase, LivenessProbeUseCase, EnvironmentInfoUseCase

__all__ = [
    "ReportHealthUseCase",
    "LivenessProbeUseCase",
    "EnvironmentInfoUseCase",
]
