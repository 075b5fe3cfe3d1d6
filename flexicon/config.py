from pydantic_settings import BaseSettings
from functools import lru_cache
import os

# Project root is the directory holding the flexicon package
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
_ENV_PATH = os.path.join(PROJECT_ROOT, ".env")


class Settings(BaseSettings):
    # OG image render job
    og_viewport_width: int = 1200
    og_viewport_height: int = 630
    og_device_scale_factor: int = 2
    og_output_path: str = ""  # empty -> <project root>/static/og-image.png
    browser_args: list[str] = ["--no-sandbox", "--disable-setuid-sandbox"]

    # Typewriter on the logo element
    typewriter_element_id: str = "logo-text"
    typewriter_speed: int = 75  # ms per keystroke
    typewriter_type_delay: int = 3000  # ms to hold a typed snippet
    typewriter_delete_delay: int = 200  # ms pause after deleting

    class Config:
        # .env is optional; env vars win when both are set
        env_file = _ENV_PATH if os.path.exists(_ENV_PATH) else None
        env_file_encoding = "utf-8"
        extra = "ignore"


@lru_cache()
def get_settings():
    return Settings()
