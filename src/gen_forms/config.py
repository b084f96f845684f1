"""
Configuration module for Gen-Forms.

Handles environment variables and default settings.
"""

import os
from dataclasses import dataclass
from typing import Literal

from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def _env_flag(name: str, default: bool) -> bool:
    return os.getenv(name, str(default).lower()).lower() == "true"


@dataclass
class GenFormsConfig:
    """Configuration settings for Gen-Forms."""

    # Storage settings
    store_backend: Literal["sql", "memory"] = "sql"
    database_url: str = "sqlite+aiosqlite:///./gen_forms.db"
    echo_sql: bool = False

    # Run the submission validator server side before storing
    validate_submissions: bool = False

    # MCP Server settings
    mcp_transport: str = "stdio"  # stdio or sse
    mcp_port: int = 8080

    # HTTP RPC server settings
    http_port: int = 2022

    # UI settings
    ui_port: int = 7860
    api_url: str | None = None  # Remote RPC endpoint; local service when unset

    # Logging settings
    log_level: str = "INFO"
    log_file: str | None = None
    verbose_output: bool = False

    @classmethod
    def from_env(cls) -> "GenFormsConfig":
        """
        Create configuration from environment variables.

        If an environment variable is not set, uses the class field default value.
        """
        _defaults = cls()

        store_backend = os.getenv("GEN_FORMS_STORE", _defaults.store_backend).lower()
        if store_backend not in ("sql", "memory"):
            raise ValueError(
                f"Unknown GEN_FORMS_STORE: {store_backend}. Use 'sql' or 'memory'."
            )

        return cls(
            store_backend=store_backend,
            database_url=os.getenv("DATABASE_URL", _defaults.database_url),
            echo_sql=_env_flag("GEN_FORMS_ECHO_SQL", _defaults.echo_sql),
            validate_submissions=_env_flag(
                "GEN_FORMS_VALIDATE_SUBMISSIONS", _defaults.validate_submissions
            ),
            mcp_transport=os.getenv("MCP_TRANSPORT", _defaults.mcp_transport),
            mcp_port=int(os.getenv("MCP_PORT", str(_defaults.mcp_port))),
            http_port=int(os.getenv("GEN_FORMS_HTTP_PORT", str(_defaults.http_port))),
            ui_port=int(os.getenv("GEN_FORMS_UI_PORT", str(_defaults.ui_port))),
            api_url=os.getenv("GEN_FORMS_API_URL") or _defaults.api_url,
            log_level=os.getenv("GEN_FORMS_LOG_LEVEL", _defaults.log_level).upper(),
            log_file=os.getenv("GEN_FORMS_LOG_FILE") or _defaults.log_file,
            verbose_output=_env_flag("GEN_FORMS_VERBOSE_OUTPUT", _defaults.verbose_output),
        )


config = GenFormsConfig.from_env()


def get_config() -> GenFormsConfig:
    """Get the current configuration."""
    return config


def update_config(**kwargs) -> GenFormsConfig:
    """Update configuration settings."""
    global config
    for key, value in kwargs.items():
        if hasattr(config, key):
            setattr(config, key, value)
    return config
