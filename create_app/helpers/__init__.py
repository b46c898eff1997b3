"""Helper utilities for the create-app CLI."""

from create_app.helpers.process import ProcessResult, run_process
from create_app.helpers.resolver_config import (
    ResolverConfig,
    detect_package_manager,
    load_resolver_config,
)

__all__ = [
    "ProcessResult",
    "ResolverConfig",
    "detect_package_manager",
    "load_resolver_config",
    "run_process",
]
