"""Runtime configuration read from DIGITCODE_* environment variables."""

from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Settings for the batch converter.

    The CLI accepts no arguments, so the environment is the only
    configuration channel:

        DIGITCODE_LOG_LEVEL=DEBUG
        DIGITCODE_OUTPUT_FORMAT=json
    """

    model_config = {"env_prefix": "DIGITCODE_"}

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    output_format: Literal["tsv", "json", "yaml"] = "tsv"
