"""Liveness endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends

from dependencies import get_health_reporter
from domain import HealthReporter, HealthSnapshot

router = APIRouter(tags=["health"])

HealthReporterDep = Annotated[HealthReporter, Depends(get_health_reporter)]


@router.get("/health", response_model=HealthSnapshot)
def health(reporter: HealthReporterDep) -> HealthSnapshot:
    """Reports process and data-store status. Always answers 200."""
    return reporter.snapshot()
