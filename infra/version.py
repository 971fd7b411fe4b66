from __future__ import annotations

import os
from importlib import metadata

DISTRIBUTION_NAME = "agency-finance-engine"
APP_VERSION_ENV = "AF_APP_VERSION"
_DEFAULT_APP_VERSION = "0.1.0"


def _installed_version() -> str | None:
    try:
        return metadata.version(DISTRIBUTION_NAME)
    except metadata.PackageNotFoundError:
        return None


def get_app_version() -> str:
    env_override = (os.getenv(APP_VERSION_ENV) or "").strip()
    if env_override:
        return env_override

    installed = _installed_version()
    if installed:
        return installed

    return _DEFAULT_APP_VERSION


__all__ = ["get_app_version"]
