"""Shared settings loaded from environment / .env file."""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuration for the validation engine and the ``xmlconform`` CLI.

    Values are read from ``XMLCONFORM_*`` environment variables and from a
    ``.env`` file in the working directory.
    """

    model_config = SettingsConfigDict(
        env_prefix="XMLCONFORM_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = "INFO"

    # Parsing
    no_network: bool = True  # also blocks http(s) schema/instance URIs
    huge_tree: bool = False

    # CLI
    default_language: str = "http://www.w3.org/2001/XMLSchema"
