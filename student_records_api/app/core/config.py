"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields, so the
service starts with no configuration at all and talks to a local
text-generation server for summaries.
"""

import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Student Records API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8080"))

    # Base URL of the text-generation service.  Summaries are requested
    # with ``POST {summary_endpoint}/generate``.
    summary_endpoint: str = os.getenv("SUMMARY_ENDPOINT", "http://localhost:11434/api")
    model_name: str = os.getenv("MODEL_NAME", "llama3")
    # Seconds to wait for the generation service.  Zero disables the
    # timeout and leaves the request to block until the peer answers.
    summary_timeout: float = float(os.getenv("SUMMARY_TIMEOUT", "30"))

    # Inclusive range student IDs are drawn from.
    id_min: int = int(os.getenv("STUDENT_ID_MIN", "0"))
    id_max: int = int(os.getenv("STUDENT_ID_MAX", "999"))


# Environment variables must be set before this module is imported.
settings = Settings()
