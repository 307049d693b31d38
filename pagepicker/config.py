"""Configuration management for the PDF page extraction tool."""

import os
from dataclasses import dataclass, field
from typing import Optional


def _env_flag(name: str, default: str) -> bool:
    return os.environ.get(name, default).strip().lower() in ("1", "true", "yes", "on")


@dataclass
class ExtractionConfig:
    """Configuration for page extraction."""
    output_dir_name: str = field(
        default_factory=lambda: os.environ.get("OUTPUT_DIR_NAME", "output")
    )
    default_page_count: int = field(
        default_factory=lambda: int(os.environ.get("DEFAULT_PAGE_COUNT", "1"))
    )
    keep_intermediate_files: bool = field(
        default_factory=lambda: _env_flag("KEEP_INTERMEDIATE_FILES", "false")
    )


@dataclass
class ServerConfig:
    """Configuration for HTTP server."""
    host: str = field(
        default_factory=lambda: os.environ.get("HTTP_HOST", "127.0.0.1")
    )
    port: int = field(
        default_factory=lambda: int(os.environ.get("HTTP_PORT", "8089"))
    )


@dataclass
class Config:
    """Main configuration container."""
    extraction: ExtractionConfig = field(default_factory=ExtractionConfig)
    server: ServerConfig = field(default_factory=ServerConfig)


# Global configuration instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get or create the global configuration instance."""
    global _config
    if _config is None:
        _config = Config()
    return _config


def reload_config() -> Config:
    """Force reload of configuration from environment."""
    global _config
    _config = Config()
    return _config
