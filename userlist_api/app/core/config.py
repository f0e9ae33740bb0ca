"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables so the service has no dependency on
``pydantic_settings``.  Defaults are provided for all fields and are
suitable for local development; in a deployment override them via
environment variables.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "User List API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    # Empty string disables the file handler.
    log_file: str = os.getenv("LOG_FILE", "")

    # Newline‑delimited list of names loaded at startup.  A relative
    # path is resolved against the ``userlist_api`` package directory
    # by ``get_names_path``.  The file must already be grouped by
    # leading letter; it is not re‑sorted on load.
    names_file: str = os.getenv("NAMES_FILE", "app/data/usernames.txt")

    # Page size used when a client omits ``size`` or sends a value <= 0,
    # and the single upper bound applied to every paginated route.
    default_page_size: int = int(os.getenv("DEFAULT_PAGE_SIZE", "50"))
    max_page_size: int = int(os.getenv("MAX_PAGE_SIZE", "1000"))

    # Comma‑separated list of allowed origins, ``*`` for any.
    cors_origins: str = os.getenv("CORS_ORIGINS", "*")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))

    def cors_origin_list(self) -> List[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


def get_names_path(names_file: Optional[str] = None) -> str:
    """Compute the absolute path to the names file.

    Absolute paths are returned unchanged; relative paths are resolved
    against the package root (``userlist_api/``).
    """
    names_file = names_file or settings.names_file
    if os.path.isabs(names_file):
        return names_file
    base_dir = Path(__file__).resolve().parent.parent.parent  # userlist_api/
    return str((base_dir / names_file).resolve())


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should therefore be set before importing this module.
settings = Settings()
