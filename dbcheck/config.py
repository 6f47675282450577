# dbcheck/config.py  (pydantic v2 + pydantic-settings)
import os
from typing import MutableMapping, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import make_url
from sqlalchemy.exc import ArgumentError

URI_PREVIEW_LEN = 50


class ConfigError(RuntimeError):
    pass


class Settings(BaseSettings):
    # .env를 읽고, 비어있는 값은 무시하며, 알 수 없는 키는 무시
    model_config = SettingsConfigDict(
        env_file=".env",
        env_ignore_empty=True,
        extra="ignore",
    )

    # e.g. postgresql (출력용)
    database_provider: Optional[str] = Field(default=None, alias="DATABASE_PROVIDER")
    database_connection_uri: Optional[str] = Field(default=None, alias="DATABASE_CONNECTION_URI")
    # 클라이언트가 실제로 읽는 이름
    database_url: Optional[str] = Field(default=None, alias="DATABASE_URL")


def apply_url_alias(settings: Settings, environ: Optional[MutableMapping[str, str]] = None) -> bool:
    """
    DATABASE_URL이 비어 있고 DATABASE_CONNECTION_URI가 있으면 그대로 복사.
    - settings와 environ(기본 os.environ) 양쪽에 반영
    - 이미 매핑된 상태에서 다시 호출하면 아무 것도 하지 않음
    """
    if environ is None:
        environ = os.environ
    uri = settings.database_connection_uri
    if settings.database_url or not uri:
        return False
    settings.database_url = uri
    environ["DATABASE_URL"] = uri
    return True


def preview_uri(uri: Optional[str], limit: int = URI_PREVIEW_LEN) -> str:
    # 비밀번호는 *** 로 가린 뒤 앞부분만
    if not uri:
        return "NOT SET"
    try:
        shown = make_url(uri).render_as_string(hide_password=True)
    except (ArgumentError, ValueError):
        # URL로 파싱 불가 -> 그대로 자르기
        shown = uri
    return shown[:limit] + "..."

