"""
목적: SQLAlchemy 연결 관리 모듈을 제공한다.
설명: 엔진 생성, `SELECT 1` 핑, 세션 팩토리와 트랜잭션 범위 세션을 담당한다.
디자인 패턴: 매니저 패턴
참조: src/data_access/integrations/sql/config.py, src/data_access/integrations/sql/cnd.py
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterator, Optional

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from data_access.integrations.sql.config import SqlConfig
from data_access.shared.logging import LogContext, Logger, create_default_logger


class SqlConnectionManager:
    """SQLAlchemy 연결 관리자.

    Args:
        config: 연결 설정.
        logger: 주입 가능한 로거.
    """

    def __init__(self, config: SqlConfig, logger: Optional[Logger] = None) -> None:
        self._config = config
        self._logger = logger or create_default_logger("SqlConnectionManager")
        self._engine: Optional[Engine] = None
        self._session_factory: Optional[sessionmaker] = None

    @property
    def engine(self) -> Engine:
        if self._engine is None:
            raise RuntimeError("SQL 연결이 초기화되지 않았습니다.")
        return self._engine

    @property
    def session_factory(self) -> sessionmaker:
        if self._session_factory is None:
            raise RuntimeError("SQL 연결이 초기화되지 않았습니다.")
        return self._session_factory

    def build_engine_options(self) -> dict[str, Any]:
        """설정으로부터 `create_engine` 키워드 인자를 구성한다. SQLite는 풀 크기를 지정하지 않는다."""

        config = self._config
        options: dict[str, Any] = {"echo": config.echo_sql, "pool_pre_ping": True}
        if config.connect_args:
            options["connect_args"] = dict(config.connect_args)
        if config.is_sqlite:
            return options
        if config.max_idle_connects > 0:
            options["pool_size"] = config.max_idle_connects
            if config.max_open_connects > config.max_idle_connects:
                options["max_overflow"] = config.max_open_connects - config.max_idle_connects
            else:
                options["max_overflow"] = 0
        if config.conn_max_life_time > 0:
            options["pool_recycle"] = config.conn_max_life_time
        return options

    def connect(self) -> Engine:
        """엔진을 생성하고 `SELECT 1`로 연결을 확인한다."""

        if self._engine is not None:
            return self._engine
        engine = create_engine(self._config.url, **self.build_engine_options())
        try:
            with engine.connect() as connection:
                connection.execute(text("SELECT 1"))
        except Exception as exc:
            self._logger.error(
                f"SQL 연결 실패: {exc}",
                context=LogContext(operation="connect"),
            )
            engine.dispose()
            raise
        self._engine = engine
        self._session_factory = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)
        self._logger.info(
            "SQL 연결이 초기화되었습니다.",
            context=LogContext(database=engine.url.database, operation="connect"),
            metadata={"dialect": engine.dialect.name},
        )
        return engine

    def close(self) -> None:
        """엔진을 해제한다."""

        if self._engine is None:
            return
        self._engine.dispose()
        self._engine = None
        self._session_factory = None
        self._logger.info("SQL 연결이 종료되었습니다.")

    @contextmanager
    def session(self) -> Iterator[Session]:
        """정상 종료 시 커밋하고 예외 시 롤백하는 세션 범위를 제공한다."""

        session = self.session_factory()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()
