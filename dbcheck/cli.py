import argparse
import logging
import os
from typing import List, Optional

from .check import run_check
from .config import Settings
from .db.engine import configure_client_logging


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="dbcheck",
        description="DB 연결 점검: connect + SELECT version(). 성공 0 / 실패 1",
    )
    p.add_argument("--url", help="DATABASE_CONNECTION_URI 대신 사용할 접속 문자열")
    p.add_argument("--provider", help="DATABASE_PROVIDER 대신 사용할 값 (예: postgresql)")
    p.add_argument("-v", "--verbose", action="store_true", help="INFO 로그 + SQL echo")
    return p


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s | %(levelname)s | %(message)s",
    )
    configure_client_logging(verbose=args.verbose)

    settings = Settings()
    if args.url:
        # 명시한 URL이 기존 DATABASE_URL보다 우선
        settings.database_connection_uri = args.url
        settings.database_url = None
    if args.provider:
        settings.database_provider = args.provider
    return run_check(settings, os.environ)
