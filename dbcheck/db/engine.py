import logging

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, URL, make_url

PG_DRIVER = "postgresql+psycopg"
PG_SCHEMES = ("postgres", "postgresql", "cockroachdb")

# ORM 클라이언트 전용 쿼리 파라미터. libpq는 "invalid connection option"으로 거부함
CLIENT_ONLY_PARAMS = (
    "pgbouncer",
    "connection_limit",
    "pool_timeout",
    "schema",
    "statement_cache_size",
    "socket_timeout",
)

CLIENT_LOGGERS = ("sqlalchemy", "psycopg")


def resolve_url(uri: str) -> URL:
    url = make_url(uri)
    # 드라이버 미지정 postgres 계열 -> psycopg3
    if url.drivername in PG_SCHEMES:
        url = url.set(drivername=PG_DRIVER)
    if url.drivername.startswith("postgresql"):
        url = url.difference_update_query(CLIENT_ONLY_PARAMS)
    return url


def configure_client_logging(verbose: bool = False) -> None:
    # error / warn 만 통과
    for name in CLIENT_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    if verbose:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO)


def create_check_engine(url) -> Engine:
    # SQLAlchemy 동기 엔진 (psycopg3)
    return create_engine(url, future=True, pool_pre_ping=True)
