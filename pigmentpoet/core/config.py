import tempfile
from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_env: str = Field("development", alias="APP_ENV")
    log_level: str = Field("INFO", alias="LOG_LEVEL")

    # Output
    output_dir: Path = Field(Path(tempfile.gettempdir()) / "pigmentpoet", alias="OUTPUT_DIR")
    palette_size: int = Field(5, alias="PALETTE_SIZE")
    max_image_px: int = Field(1600, alias="MAX_IMAGE_PX")

    # Posting
    trigger_tag: str = Field("pigmentpoet", alias="TRIGGER_TAG")
    post_tags: str = Field("Color,Design,Art", alias="POST_TAGS")

    # Image of the day
    bing_image_url: str = Field(
        "https://www.bing.com/HPImageArchive.aspx?format=js&idx=0&n=1&mkt=en-US",
        alias="BING_IMAGE_URL",
    )
    http_timeout: float = Field(20.0, alias="HTTP_TIMEOUT")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    @property
    def post_tag_list(self) -> list[str]:
        return [t.strip() for t in self.post_tags.split(",") if t.strip()]


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
