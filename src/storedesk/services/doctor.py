from __future__ import annotations

import platform
import sys
from pathlib import Path

import requests

from storedesk.config import Settings
from storedesk.sources.admin_api import AdminApiSource


def _directory_check(name: str, path: Path) -> dict[str, str]:
    return {
        "check": name,
        "status": "ok" if path.exists() else "warn",
        "detail": str(path),
    }


def run_doctor_checks(settings: Settings, source: AdminApiSource | None = None) -> list[dict[str, str]]:
    if source is None:
        with AdminApiSource.from_settings(settings) as owned_source:
            return run_doctor_checks(settings, owned_source)

    checks: list[dict[str, str]] = []

    checks.append(
        {
            "check": "python_version",
            "status": "ok" if sys.version_info >= (3, 11) else "warn",
            "detail": platform.python_version(),
        }
    )
    checks.append(_directory_check("logs_dir", settings.logs_dir))
    checks.append(_directory_check("exports_dir", settings.exports_dir))

    try:
        source.check_connection()
        checks.append({"check": "admin_api", "status": "ok", "detail": settings.api_url})
    except requests.RequestException as exc:
        checks.append(
            {
                "check": "admin_api",
                "status": "warn",
                "detail": f"{settings.api_url}: {exc.__class__.__name__}: {exc}",
            }
        )

    if not settings.api_token:
        checks.append(
            {
                "check": "api_token",
                "status": "warn",
                "detail": "STOREDESK_API_TOKEN is not set",
            }
        )

    return checks
