"""
Configuration module for schema-form.

Handles environment variables and default settings.
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

# Load environment variables
load_dotenv()


@dataclass
class SchemaFormConfig:
    """Configuration settings for schema-form."""

    # Conversion settings
    default_method: str = "POST"
    pattern_error_message: str = "Invalid format"

    # MCP Server settings
    mcp_transport: str = "stdio"  # stdio or sse
    mcp_port: int = 8080

    # Output settings
    log_level: str = "INFO"
    indent_json_output: int = 2

    @classmethod
    def from_env(cls) -> "SchemaFormConfig":
        """
        Create configuration from environment variables.

        If an environment variable is not set, uses the class field default value.
        """
        _defaults = cls()

        return cls(
            default_method=os.getenv("SCHEMA_FORM_DEFAULT_METHOD", _defaults.default_method),
            pattern_error_message=os.getenv("SCHEMA_FORM_PATTERN_ERROR", _defaults.pattern_error_message),
            mcp_transport=os.getenv("MCP_TRANSPORT", _defaults.mcp_transport),
            mcp_port=int(os.getenv("MCP_PORT", str(_defaults.mcp_port))),
            log_level=os.getenv("SCHEMA_FORM_LOG_LEVEL", _defaults.log_level).upper(),
            indent_json_output=int(os.getenv("SCHEMA_FORM_JSON_INDENT", str(_defaults.indent_json_output))),
        )


config = SchemaFormConfig.from_env()


def get_config() -> SchemaFormConfig:
    """Get the current configuration."""
    return config


def update_config(**kwargs) -> SchemaFormConfig:
    """Update configuration settings."""
    global config
    for key, value in kwargs.items():
        if hasattr(config, key):
            setattr(config, key, value)
    return config
