"""Mini README: Centralised configuration models and helpers for Food Corner.

Structure:
    * FoodCornerSettings - Pydantic settings model describing runtime configuration.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Import ``get_settings`` to read ``FOODCORNER_`` environment variables (or a
    local ``.env`` file) for the restaurant name, service binding and the
    decorative images shown on the utilities screen. Settings are validated
    once per process and cached.
"""

from __future__ import annotations

from functools import lru_cache
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_IMAGE_URLS = [
    "https://cdn.vox-cdn.com/thumbor/kLdyb9MwmRW-TZY6IP7-VFJOrog=/0x0:2000x1333/1200x0/"
    "filters:focal(0x0:2000x1333):no_upscale()/cdn.vox-cdn.com/uploads/chorus_asset/"
    "file/16187469/TheVault_PChang_3986.jpg",
    "https://thevendry.com/cdn-cgi/image/width=3840,quality=75,fit=contain,metadata=none,"
    "format=auto/https%3A%2F%2Fs3.amazonaws.com%2Fuploads.thevendry.co%2F20510%2F"
    "1640140834107_Priviate-Dining-Room-Rectangles.jpg",
    "https://media.architecturaldigest.com/photos/61aebcdec08880e1f2206c49/3:2/"
    "w_3600,h_2400,c_limit/Boulevard_Dining%20Room.jpg",
]


class FoodCornerSettings(BaseSettings):
    """Runtime configuration for the Food Corner service."""

    model_config = SettingsConfigDict(
        env_prefix="FOODCORNER_",
        env_file=".env",
        case_sensitive=False,
    )

    environment: str = Field(
        "development",
        description="Environment label controlling debug toggles and logging levels.",
    )
    restaurant_name: str = Field(
        "Divya's Food Corner",
        description="Display name rendered on the home screen.",
    )
    interface_host: str = Field(
        "0.0.0.0",
        description="Network interface for the web service to bind to.",
    )
    interface_port: int = Field(
        8000,
        description="Default port the web service exposes.",
        ge=1,
        le=65535,
    )
    image_urls: List[str] = Field(
        default_factory=lambda: list(DEFAULT_IMAGE_URLS),
        description="Decorative images fetched for the utilities screen.",
    )
    image_timeout_seconds: float = Field(
        10.0,
        description="Per-image fetch timeout.",
        gt=0,
    )

    @field_validator("image_urls")
    @classmethod
    def _strip_blank_urls(cls, value: List[str]) -> List[str]:
        """Drop empty entries so a trailing comma in the environment is harmless."""

        return [url.strip() for url in value if url and url.strip()]


@lru_cache()
def get_settings() -> FoodCornerSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return FoodCornerSettings()
