"""Helpers shared by the CLI commands."""

from __future__ import annotations

import click

from storefront.config import ConfigurationError, Settings
from storefront.infrastructure.bootstrap import Container, build_container
from storefront.infrastructure.logging import configure_logging


def load_container() -> Container:
    """Build the service container from the environment, or exit cleanly."""
    try:
        settings = Settings.from_env()
    except ConfigurationError as exc:
        raise click.ClickException(str(exc))
    configure_logging(settings.log_level, settings.log_json)
    return build_container(settings)
