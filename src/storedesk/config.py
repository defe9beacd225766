from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_API_URL = "http://localhost:3000"
DEFAULT_CURRENCY = "USD"


@dataclass(slots=True)
class Settings:
    root_dir: Path
    logs_dir: Path
    exports_dir: Path
    api_url: str = DEFAULT_API_URL
    api_token: str | None = None
    http_timeout_sec: float = 15.0
    default_currency: str = DEFAULT_CURRENCY

    @classmethod
    def load(cls, base_dir: Path | None = None) -> Settings:
        load_dotenv(override=False)

        root_env = os.getenv("STOREDESK_HOME")
        root_dir = Path(root_env).expanduser().resolve() if root_env else (base_dir or Path.cwd()).resolve()

        logs_dir = Path(os.getenv("STOREDESK_LOG_DIR", root_dir / "logs")).expanduser().resolve()
        exports_dir = Path(os.getenv("STOREDESK_EXPORT_DIR", root_dir / "exports")).expanduser().resolve()

        api_url = os.getenv("STOREDESK_API_URL", DEFAULT_API_URL).strip().rstrip("/")
        api_token = os.getenv("STOREDESK_API_TOKEN") or None
        http_timeout_sec = float(os.getenv("STOREDESK_HTTP_TIMEOUT_SEC", "15"))
        default_currency = os.getenv("STOREDESK_CURRENCY", DEFAULT_CURRENCY).strip().upper() or DEFAULT_CURRENCY

        return cls(
            root_dir=root_dir,
            logs_dir=logs_dir,
            exports_dir=exports_dir,
            api_url=api_url or DEFAULT_API_URL,
            api_token=api_token,
            http_timeout_sec=http_timeout_sec,
            default_currency=default_currency,
        )

    def ensure_directories(self) -> None:
        for path in [self.root_dir, self.logs_dir, self.exports_dir]:
            path.mkdir(parents=True, exist_ok=True)
