"""
목적: 관계형 DB 연결 설정 모델을 제공한다.
설명: SQLAlchemy URL과 커넥션 풀 설정을 검증한다.
디자인 패턴: 데이터 전송 객체(DTO)
참조: src/data_access/integrations/sql/connection.py, src/data_access/shared/config/loader.py
"""

from __future__ import annotations

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field

from data_access.shared.config import ConfigLoader


class SqlConfig(BaseModel):
    """관계형 DB 연결 설정.

    Args:
        url: SQLAlchemy 연결 URL.
        max_open_connects: 동시에 열 수 있는 최대 연결 수.
        max_idle_connects: 풀에 유지하는 연결 수.
        conn_max_life_time: 연결 재활용 주기(초).
        echo_sql: 실행 SQL 출력 여부.
        connect_args: DBAPI `connect()`에 전달할 추가 인자.
    """

    model_config = ConfigDict(coerce_numbers_to_str=True)

    url: str = Field(..., min_length=1)
    max_open_connects: int = 0
    max_idle_connects: int = 0
    conn_max_life_time: int = 0
    echo_sql: bool = False
    connect_args: Dict[str, Any] = Field(default_factory=dict)

    @property
    def is_sqlite(self) -> bool:
        return self.url.startswith("sqlite")

    @classmethod
    def from_loader(cls, loader: ConfigLoader, section: str = "sql") -> "SqlConfig":
        """설정 로더의 섹션을 검증해 설정 모델을 생성한다."""

        return cls.model_validate(loader.build_section(section))
