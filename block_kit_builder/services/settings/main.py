from functools import lru_cache
from typing import Literal, Optional

from pydantic_settings import BaseSettings


class CoreSettings(BaseSettings):
    APP_NAME: str = "block-kit-builder"
    DEBUG: bool = False


class BuilderSettings(BaseSettings):
    DEFAULT_TIMEZONE: Optional[str] = None
    OPTION_GROUP_LIMIT: int = 100
    TIMEZONE_SET: Literal["common", "all"] = "common"


class Settings(CoreSettings, BuilderSettings):
    pass


@lru_cache()
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
