"""Service container wiring application components."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ibanval.config import AppSettings
from ibanval.registry import CountryRegistry, registry
from ibanval.validation import IbanValidator

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ServiceContainer:
    """Aggregates the services shared by CLI commands."""

    settings: AppSettings
    country_registry: CountryRegistry
    validator: IbanValidator


def build_container(settings: AppSettings | None = None) -> ServiceContainer:
    """Construct the primary service container."""

    resolved_settings = settings or AppSettings.from_env()
    validator = IbanValidator(registry, logger=logger)
    logger.debug(
        "Built container for %s with %d registry countries",
        resolved_settings.environment,
        len(registry),
    )
    return ServiceContainer(
        settings=resolved_settings,
        country_registry=registry,
        validator=validator,
    )


__all__ = ["ServiceContainer", "build_container"]
