#!/usr/bin/env python3
"""
Configuration management for Vimeo MCP Lite
Centralized settings for the Vimeo API, input validation, and the MCP server
"""

import os
import logging
from pathlib import Path
from pydantic import BaseModel, Field, validator
from dotenv import load_dotenv

# Load environment variables from the .env file next to this config.py
config_dir = Path(__file__).parent
env_file = config_dir / ".env"
load_dotenv(dotenv_path=env_file)

logger = logging.getLogger(__name__)


class VimeoAPIConfig(BaseModel):
    """Vimeo API configuration"""

    access_token: str = Field(
        default="",
        description="Pre-issued Vimeo personal access token"
    )

    base_url: str = Field(
        default="https://api.vimeo.com",
        description="Vimeo API base URL"
    )

    api_version: str = Field(
        default="3.4",
        description="Vimeo API version sent in the Accept header"
    )

    timeout_seconds: float = Field(
        default=30.0,
        description="API request timeout"
    )

    max_folder_pages: int = Field(
        default=50,
        description="Upper bound on pages fetched by list_folders"
    )

    @validator('access_token', pre=True, always=True)
    def validate_access_token(cls, v):
        token = v or os.getenv("VIMEO_ACCESS_TOKEN")
        if not token:
            raise ValueError(
                "VIMEO_ACCESS_TOKEN environment variable required. "
                "Please set it in your .env file or environment variables."
            )
        return token.strip()

    @validator('base_url', pre=True, always=True)
    def set_base_url(cls, v):
        url = os.getenv("VIMEO_API_BASE_URL") or v or "https://api.vimeo.com"
        return url.rstrip("/")

    @validator('timeout_seconds', pre=True, always=True)
    def set_timeout_seconds(cls, v):
        return float(os.getenv("VIMEO_TIMEOUT_SECONDS", v or 30.0))

    @validator('max_folder_pages')
    def validate_max_folder_pages(cls, v):
        if v < 1:
            raise ValueError("max_folder_pages must be at least 1")
        return v


class ValidationConfig(BaseModel):
    """Input validation configuration"""

    default_page: int = Field(
        default=1,
        description="Page used when none is given"
    )

    max_per_page: int = Field(
        default=100,
        description="Hard cap on results per page (Vimeo limit)"
    )

    max_query_length: int = Field(
        default=500,
        description="Maximum search query length"
    )

    max_folder_name_length: int = Field(
        default=128,
        description="Maximum folder name length"
    )

    description_preview_length: int = Field(
        default=500,
        description="Characters of a video description returned by get_video"
    )


class ServerConfig(BaseModel):
    """Main server configuration"""

    transport: str = Field(
        default="stdio",
        description="Transport mode: stdio or http"
    )

    host: str = Field(
        default="0.0.0.0",
        description="Server host for HTTP mode"
    )

    port: int = Field(
        default=8080,
        description="Server port for HTTP mode"
    )

    log_level: str = Field(
        default="INFO",
        description="Logging level"
    )

    @validator('transport', pre=True, always=True)
    def set_transport(cls, v):
        transport = (os.getenv("MCP_TRANSPORT") or v or "stdio").lower()
        if transport not in ("stdio", "http"):
            raise ValueError(f"Invalid transport: {transport}. Use 'stdio' or 'http'")
        return transport

    @validator('port', pre=True, always=True)
    def set_port(cls, v):
        return int(os.getenv("PORT", v or 8080))

    @validator('log_level', pre=True, always=True)
    def set_log_level(cls, v):
        level = (os.getenv("LOG_LEVEL") or v or "INFO").upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            logger.warning(f"⚠️  Unknown LOG_LEVEL '{level}', falling back to INFO")
            return "INFO"
        return level


class AppConfig(BaseModel):
    """Application-wide configuration"""

    vimeo_api: VimeoAPIConfig = Field(default_factory=VimeoAPIConfig)
    validation: ValidationConfig = Field(default_factory=ValidationConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)

    class Config:
        validate_assignment = True


def get_config() -> AppConfig:
    """
    Build the application configuration from the environment

    Raises:
        pydantic.ValidationError: If VIMEO_ACCESS_TOKEN is missing
    """
    return AppConfig()


def describe_config_error(error) -> str:
    """
    Startup message for a configuration ValidationError

    Only a problem with the access token is reported as a missing token;
    anything else (bad PORT, unknown MCP_TRANSPORT, ...) is reported as is.
    """
    token_errors = [
        err for err in error.errors()
        if "access_token" in err.get("loc", ())
    ]
    if token_errors:
        return "Error: VIMEO_ACCESS_TOKEN environment variable required"
    return f"Error: invalid configuration\n{error}"
