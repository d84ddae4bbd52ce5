"""Configuration Management."""

import os
from functools import lru_cache
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Startup settings named gui_module_add_<anything> each contribute one provider
MODULE_ADD_PREFIX = "GUI_MODULE_ADD_"

DEFAULT_PROVIDERS = ["gui_modules.builtin.window_frame"]


class Settings(BaseSettings):
    """Startup settings from environment."""

    model_config = SettingsConfigDict(
        env_prefix="GUI_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    log_level: str = Field(default="INFO", description="Log level")
    json_logs: bool = Field(default=False, description="Use JSON log format")

    # Modules
    module_providers: List[str] = Field(
        default_factory=lambda: list(DEFAULT_PROVIDERS),
        description="Module provider references (package.module[:attr])",
    )

    # Tree traversal
    child_fields: List[str] = Field(
        default_factory=lambda: ["children", "tabs"],
        description="Node fields holding ordered child sequences",
    )

    @field_validator("child_fields")
    @classmethod
    def validate_child_fields(cls, v: List[str]) -> List[str]:
        """Require at least one child field."""
        if not v:
            raise ValueError("child_fields cannot be empty")
        return v

    def provider_references(self) -> List[str]:
        """
        All configured provider references, in load order.

        Explicit ``module_providers`` come first, then every
        ``GUI_MODULE_ADD_*`` environment variable sorted by name.
        """
        references = list(self.module_providers)
        for name in sorted(os.environ):
            if name.upper().startswith(MODULE_ADD_PREFIX):
                references.append(os.environ[name])

        seen = set()
        unique = []
        for ref in references:
            if ref not in seen:
                seen.add(ref)
                unique.append(ref)
        return unique


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
