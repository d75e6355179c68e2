"""Vaccine Registry — application entry point for in-process callers.

Invariants:
    - Every call returns a NEW service with an empty registry
    - Logging configured from Settings before the service is handed out

Design Decisions:
    - Factory over module-level instance: the host owns the service lifecycle
"""

import logging

from vaccine_registry.config import Settings, get_settings
from vaccine_registry.infrastructure.observability import setup_logging
from vaccine_registry.services.vaccine_service import VaccineService

logger = logging.getLogger(__name__)


def create_vaccine_service(settings: Settings | None = None) -> VaccineService:
    """Configure logging and build an empty VaccineService."""
    settings = settings or get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info(f"{settings.service_name} started")
    return VaccineService()
