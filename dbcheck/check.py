# dbcheck/check.py
"""
DB 연결 점검 1회 실행
- 환경 출력 -> DATABASE_URL 매핑 -> 엔진 생성 -> connect -> SELECT version() -> dispose
- 성공 0 / 실패 1 (재시도 없음)
- 실패 시 코드/메시지/전체 에러 + 힌트 블록을 stderr로, 이후 dispose는 best-effort
"""
import logging
import sys
from typing import Callable, MutableMapping, Optional

from sqlalchemy import text

from .config import ConfigError, Settings, apply_url_alias, preview_uri
from .db.engine import create_check_engine, resolve_url
from .hints import format_hint, match_hints

log = logging.getLogger(__name__)

VERSION_SQL = "SELECT version()"


def error_code(exc: BaseException):
    # psycopg3: sqlstate / psycopg2: pgcode / 그 외 SQLAlchemy 자체 코드
    orig = getattr(exc, "orig", None)
    for attr in ("sqlstate", "pgcode"):
        code = getattr(orig, attr, None)
        if code:
            return code
    return getattr(exc, "code", None)


def report_failure(exc: BaseException) -> None:
    message = str(exc)
    err = sys.stderr
    print("\n❌ Database connection failed:", file=err)
    print("Error code:", error_code(exc), file=err)
    print("Error message:", message, file=err)
    print("\nFull error:", repr(exc), file=err)
    for hint in match_hints(message):
        print(format_hint(hint), file=err)


def _dispose_quietly(engine) -> None:
    if engine is None:
        return
    try:
        engine.dispose()
    except Exception as e:
        log.debug("dispose after failure ignored: %s", e)


def run_check(
    settings: Settings,
    environ: Optional[MutableMapping[str, str]] = None,
    engine_factory: Callable = create_check_engine,
) -> int:
    print("Testing database connection...")
    print("DATABASE_PROVIDER:", settings.database_provider or "NOT SET")
    print("DATABASE_CONNECTION_URI:", preview_uri(settings.database_connection_uri))

    if apply_url_alias(settings, environ):
        print("Mapped DATABASE_CONNECTION_URI to DATABASE_URL")

    engine = None
    try:
        print("\nAttempting to connect...")
        if not settings.database_url:
            raise ConfigError("DATABASE_URL is not set (set DATABASE_CONNECTION_URI or DATABASE_URL)")
        engine = engine_factory(resolve_url(settings.database_url))
        with engine.connect() as conn:
            print("✅ Database connection successful!")
            version = conn.execute(text(VERSION_SQL)).scalar()
            print("✅ Database query successful!")
            print("PostgreSQL version:", version or "Unknown")
        engine.dispose()
        return 0
    except Exception as e:
        report_failure(e)
        log.debug("check failed", exc_info=True)
        _dispose_quietly(engine)
        return 1
