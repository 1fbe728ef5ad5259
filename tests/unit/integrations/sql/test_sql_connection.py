"""
목적: SQLAlchemy 연결 관리자와 SQL 유틸리티를 검증한다.
설명: 엔진 옵션 구성, 연결 실패 전파, 세션 커밋/롤백, 식별자 인용, 빈 문자열 NULL 변환을 확인한다.
디자인 패턴: 매니저 패턴
참조: src/data_access/integrations/sql/connection.py, src/data_access/integrations/sql/utils.py
"""

from __future__ import annotations

import pytest
from sqlalchemy import text
from sqlalchemy.dialects import mysql, postgresql
from sqlalchemy.exc import OperationalError

from data_access.integrations.sql import (
    SqlConfig,
    SqlConnectionManager,
    keyword_wrap,
    null_if_blank,
)
from data_access.shared.logging import InMemoryLogger, LogLevel


def test_engine_options_for_pooled_database() -> None:
    """풀 설정이 pool_size/max_overflow/pool_recycle로 변환되는지 확인한다."""

    config = SqlConfig(
        url="postgresql+psycopg://app:pw@localhost/app",
        max_open_connects=20,
        max_idle_connects=5,
        conn_max_life_time=300,
    )

    options = SqlConnectionManager(config).build_engine_options()

    assert options["pool_size"] == 5
    assert options["max_overflow"] == 15
    assert options["pool_recycle"] == 300
    assert options["pool_pre_ping"] is True


def test_engine_options_for_sqlite_skip_pool_size() -> None:
    """SQLite는 풀 크기 옵션을 생략하는지 확인한다."""

    config = SqlConfig(url="sqlite:///:memory:", max_idle_connects=5, echo_sql=True)

    options = SqlConnectionManager(config).build_engine_options()

    assert options == {"echo": True, "pool_pre_ping": True}


def test_connect_failure_is_logged_and_propagated(tmp_path) -> None:
    """연결 확인 실패가 기록되고 전파되는지 확인한다."""

    logger = InMemoryLogger(name="sql-conn-test")
    url = f"sqlite:///{tmp_path / 'missing-dir' / 'app.db'}"
    manager = SqlConnectionManager(SqlConfig(url=url), logger=logger)

    with pytest.raises(OperationalError):
        manager.connect()

    assert logger.repository.list()[-1].level == LogLevel.ERROR
    with pytest.raises(RuntimeError):
        _ = manager.engine


def test_session_commits_and_rolls_back(tmp_path) -> None:
    """세션 범위가 성공 시 커밋하고 예외 시 롤백하는지 확인한다."""

    manager = SqlConnectionManager(SqlConfig(url=f"sqlite:///{tmp_path / 'app.db'}"))
    manager.connect()
    with manager.session() as session:
        session.execute(text("CREATE TABLE items (name TEXT)"))
        session.execute(text("INSERT INTO items VALUES ('kept')"))

    with pytest.raises(RuntimeError):
        with manager.session() as session:
            session.execute(text("INSERT INTO items VALUES ('dropped')"))
            raise RuntimeError("abort")

    with manager.session() as session:
        names = session.execute(text("SELECT name FROM items")).scalars().all()
    manager.close()

    assert names == ["kept"]


def test_keyword_wrap() -> None:
    """기본 백틱 인용과 방언별 인용을 확인한다."""

    assert keyword_wrap("order") == "`order`"
    assert keyword_wrap("") == ""
    assert keyword_wrap("   ") == "   "
    assert keyword_wrap("user", postgresql.dialect()) == '"user"'
    assert keyword_wrap("order", mysql.dialect()) == "`order`"


@pytest.mark.parametrize(("value", "expected"), [("", None), (None, None), ("x", "x")])
def test_null_if_blank(value, expected) -> None:
    """빈 문자열만 `None`으로 바뀌는지 확인한다."""

    assert null_if_blank(value) == expected
