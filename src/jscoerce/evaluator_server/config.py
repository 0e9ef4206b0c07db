"""Configuration management for the evaluator server."""

import os
from dataclasses import dataclass


@dataclass
class EvaluatorServerConfig:
    """Configuration class for the evaluator server."""

    # MCP Server Configuration
    server_name: str = "jscoerce-evaluator"
    transport: str = "stdio"

    # Value decoding
    max_value_depth: int = 32  # nested hook results per encoded value
    record_hook_calls: bool = True

    # Runtime Configuration
    debug_mode: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_environment(cls) -> "EvaluatorServerConfig":
        """Create configuration from environment variables."""
        return cls(
            server_name=os.getenv("EVALUATOR_SERVER_NAME", "jscoerce-evaluator"),
            transport=os.getenv("MCP_TRANSPORT", "stdio"),
            max_value_depth=int(os.getenv("MAX_VALUE_DEPTH", "32")),
            record_hook_calls=os.getenv("RECORD_HOOK_CALLS", "true").lower() == "true",
            debug_mode=os.getenv("DEBUG_MODE", "false").lower() == "true",
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

    def validate(self) -> tuple[bool, list[str]]:
        """Validate configuration settings."""
        errors = []

        if not self.server_name:
            errors.append("server_name cannot be empty")

        valid_transports = ["stdio", "http", "sse", "streamable-http"]
        if self.transport not in valid_transports:
            errors.append(f"transport must be one of {valid_transports}")

        if self.max_value_depth <= 0:
            errors.append("max_value_depth must be positive")

        valid_log_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if self.log_level not in valid_log_levels:
            errors.append(f"log_level must be one of {valid_log_levels}")

        return len(errors) == 0, errors

    def __post_init__(self):
        """Post-initialization validation."""
        is_valid, errors = self.validate()
        if not is_valid:
            raise ValueError(f"Invalid configuration: {', '.join(errors)}")


# Global configuration instance
_config: EvaluatorServerConfig | None = None


def get_config() -> EvaluatorServerConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = EvaluatorServerConfig.from_environment()
    return _config


def set_config(config: EvaluatorServerConfig) -> None:
    """Set the global configuration instance."""
    global _config
    _config = config


def reset_config() -> None:
    """Reset the global configuration instance."""
    global _config
    _config = None
