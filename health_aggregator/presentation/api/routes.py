from fastapi import APIRouter, Depends, Response
from fastapi.responses import PlainTextResponse
from typing import Optional

from health_aggregator.presentation.schemas import (
    LivenessDTO,
    CheckReportDTO,
    EnvironmentDTO,
)
from health_aggregator.application import (
    ReportHealthUseCase,
    LivenessProbeUseCase,
    EnvironmentInfoUseCase,
)
from health_aggregator.domain import CheckRegistry, IEncoder
from health_aggregator.presentation.dependencies import (
    get_registry,
    get_functional_registry,
    get_encoder,
    get_report_health_use_case,
    get_liveness_use_case,
    get_environment_info_use_case,
)


router = APIRouter()


def _send(body: bytes, encoder: IEncoder) -> Response:
    return Response(content=body, status_code=200, media_type=encoder.media_type)


def _not_found() -> PlainTextResponse:
    return PlainTextResponse("not found", status_code=404)


@router.get("/health_check", responses={200: {"model": LivenessDTO}})
def health_check(
    use_case: LivenessProbeUseCase = Depends(get_liveness_use_case),
    encoder: IEncoder = Depends(get_encoder),
) -> Response:
    """Liveness probe. Does not run any checks."""
    return _send(use_case.execute(), encoder)


@router.get("/environment", responses={200: {"model": EnvironmentDTO}})
def environment(
    use_case: EnvironmentInfoUseCase = Depends(get_environment_info_use_case),
    encoder: IEncoder = Depends(get_encoder),
) -> Response:
    """Runtime environment metadata."""
    return _send(use_case.execute(), encoder)


@router.get(
    "/functional",
    responses={200: {"model": CheckReportDTO}, 404: {"description": "No functional checks configured"}},
)
def functional(
    registry: Optional[CheckRegistry] = Depends(get_functional_registry),
    use_case: ReportHealthUseCase = Depends(get_report_health_use_case),
    encoder: IEncoder = Depends(get_encoder),
) -> Response:
    """Run the functional checks and report their status."""
    if registry is None:
        return _not_found()
    return _send(use_case.execute(registry), encoder)


@router.get("/", responses={200: {"model": CheckReportDTO}})
def checks(
    registry: CheckRegistry = Depends(get_registry),
    use_case: ReportHealthUseCase = Depends(get_report_health_use_case),
    encoder: IEncoder = Depends(get_encoder),
) -> Response:
    """Run the default checks and report their status."""
    return _send(use_case.execute(registry), encoder)


@router.api_route(
    "/{path:path}",
    methods=["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    include_in_schema=False,
)
def not_found(path: str) -> PlainTextResponse:
    """Any other path below the mount point."""
    return _not_found()
