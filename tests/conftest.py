import logging
import sqlite3

import pytest
from sqlalchemy import create_engine, event

PG_VERSION = "PostgreSQL 15.4 on x86_64-pc-linux-gnu, compiled by gcc, 64-bit"

CHECK_ENV = ("DATABASE_PROVIDER", "DATABASE_CONNECTION_URI", "DATABASE_URL")
CLIENT_LOGGERS = ("sqlalchemy", "sqlalchemy.engine", "psycopg")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    # 로컬 .env / 셸 환경이 테스트에 섞이지 않도록
    monkeypatch.chdir(tmp_path)
    for k in CHECK_ENV:
        # setenv 후 delenv: 테스트가 새로 만든 값도 teardown 때 정리됨
        monkeypatch.setenv(k, "")
        monkeypatch.delenv(k)


@pytest.fixture(autouse=True)
def restore_client_loggers():
    # configure_client_logging()이 바꾼 레벨을 테스트마다 원복
    saved = {n: logging.getLogger(n).level for n in CLIENT_LOGGERS}
    yield
    for n, level in saved.items():
        logging.getLogger(n).setLevel(level)


@pytest.fixture
def version_engine_factory():
    """sqlite에 version() 함수를 붙여 PG 서버 대용으로 사용"""
    made = []

    def factory(url):
        engine = create_engine("sqlite://", future=True)

        @event.listens_for(engine, "connect")
        def _register(dbapi_conn, _record):
            dbapi_conn.create_function("version", 0, lambda: PG_VERSION)

        made.append((url, engine))
        return engine

    factory.made = made
    return factory


@pytest.fixture
def failing_engine_factory():
    """connect 시 주어진 메시지로 드라이버 에러를 던지는 엔진"""

    def make(message):
        def creator():
            raise sqlite3.OperationalError(message)

        def factory(url):
            return create_engine("sqlite://", future=True, creator=creator)

        return factory

    return make


@pytest.fixture
def pg_version():
    return PG_VERSION
