"""Configuration settings for the RabbitMQ admin MCP server.

This module defines the settings used by the outer surfaces (the MCP
server and :meth:`RabbitMQAdminClient.from_settings`): management API
location, credentials, transport options and logging. Settings are loaded
from ``RABBITMQ_ADMIN_*`` environment variables and ``.env`` files.

The client itself never reads the environment; it receives its base URL
and credentials explicitly.
"""

from typing import Literal
from urllib.parse import urlsplit

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    :param api_url: Base URL of the management API
    :type api_url: str
    :param username: Management user name
    :type username: str
    :param password: Management password
    :type password: str
    :param http_timeout_seconds: Read timeout for management API calls
    :type http_timeout_seconds: float
    :param verify_tls: Verify the broker's TLS certificate
    :type verify_tls: bool
    :param mcp_server_name: Name advertised by the MCP server
    :type mcp_server_name: str
    :param log_level: Logging level for the application
    :type log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    """

    model_config = SettingsConfigDict(
        env_prefix="RABBITMQ_ADMIN_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra fields in .env file
    )

    # Management API
    api_url: str = Field(
        "http://localhost:15672/api", description="RabbitMQ management API base URL"
    )
    username: str = Field("guest", min_length=1, description="Management user name")
    password: str = Field("guest", repr=False, description="Management password")

    # Transport
    http_timeout_seconds: float = Field(
        30.0, gt=0, description="Read timeout per request (seconds)"
    )
    verify_tls: bool = Field(True, description="Verify TLS certificates")

    # MCP Server Configuration
    mcp_server_name: str = Field("rabbitmq-admin", description="MCP Server Name")

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        "INFO", description="Logging level"
    )

    @field_validator("api_url")
    @classmethod
    def validate_api_url(cls, v: str) -> str:
        """Require an http(s) URL and drop any trailing slash.

        :param v: The configured API base URL
        :type v: str
        :return: Normalized API base URL
        :rtype: str
        :raises ValueError: If the URL is not http or https
        """
        parts = urlsplit(v.strip())
        if parts.scheme not in ("http", "https") or not parts.netloc:
            raise ValueError(f"api_url must be an http(s) URL, got {v!r}")
        return v.strip().rstrip("/")

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        """Accept log levels in any case."""
        return v.upper() if isinstance(v, str) else v
