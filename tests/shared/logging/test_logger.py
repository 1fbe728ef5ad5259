"""
목적: 인메모리 로거와 로그 모델 동작을 검증한다.
설명: 로그 기록, 컨텍스트 병합, 최소 레벨 필터링, 표준 출력 직렬화를 확인한다.
디자인 패턴: 전략 패턴, 저장소 패턴
참조: src/data_access/shared/logging/logger.py, src/data_access/shared/logging/models.py
"""

from __future__ import annotations

import json

from data_access.shared.logging import (
    InMemoryLogger,
    InMemoryLogRepository,
    LogContext,
    LogLevel,
    create_default_logger,
)


def test_inmemory_logger_records_log() -> None:
    """기본 로거가 로그를 기록하는지 확인한다."""

    logger = create_default_logger("unit-test")
    logger.info("시작 로그")

    records = logger.repository.list()

    assert len(records) == 1
    assert records[0].level == LogLevel.INFO
    assert records[0].message == "시작 로그"
    assert records[0].logger_name == "unit-test"


def test_logger_with_context_merges_tags() -> None:
    """컨텍스트 병합 규칙이 올바른지 확인한다."""

    base_context = LogContext(database="app", tags={"service": "api", "env": "dev"})
    logger = InMemoryLogger(name="ctx-test", base_context=base_context)

    logger.info("기본 컨텍스트 로그")

    child_context = LogContext(
        collection="users",
        operation="find",
        tags={"env": "prod"},
    )
    logger.with_context(child_context).error("확장 컨텍스트 로그")

    records = logger.repository.list()

    assert len(records) == 2
    assert records[0].context is not None
    assert records[0].context.database == "app"
    assert records[1].context is not None
    assert records[1].context.database == "app"
    assert records[1].context.collection == "users"
    assert records[1].context.operation == "find"
    assert records[1].context.tags == {"service": "api", "env": "prod"}


def test_logger_filters_below_min_level() -> None:
    """최소 레벨 미만 로그는 저장되지 않는지 확인한다."""

    repository = InMemoryLogRepository()
    logger = InMemoryLogger(name="level-test", repository=repository, min_level=LogLevel.WARNING)

    logger.debug("무시")
    logger.info("무시")
    logger.warning("기록")
    logger.critical("기록")

    assert [record.level for record in repository.list()] == [LogLevel.WARNING, LogLevel.CRITICAL]
    repository.clear()
    assert repository.list() == []


def test_logger_writes_json_line_to_stdout(capsys) -> None:
    """표준 출력 모드에서 JSON 한 줄이 출력되는지 확인한다."""

    logger = InMemoryLogger(name="stdout-test", emit_stdout=True)
    logger.info(
        "명령 성공",
        context=LogContext(operation="ping"),
        metadata={"duration_micros": 120},
    )

    line = capsys.readouterr().out.strip()
    payload = json.loads(line)

    assert payload["level"] == "INFO"
    assert payload["logger"] == "stdout-test"
    assert payload["context"]["operation"] == "ping"
    assert payload["metadata"]["duration_micros"] == 120


def test_repository_keeps_only_recent_records() -> None:
    """저장소가 최근 레코드만 보관하는지 확인한다."""

    repository = InMemoryLogRepository(max_records=3)
    logger = InMemoryLogger(name="bounded-test", repository=repository, min_level=LogLevel.INFO)

    for index in range(10):
        logger.info(f"로그 {index}")

    assert [record.message for record in repository.list()] == ["로그 7", "로그 8", "로그 9"]


def test_default_min_level_is_info(monkeypatch) -> None:
    """LOG_LEVEL이 없으면 DEBUG 로그를 기록하지 않는지 확인한다."""

    monkeypatch.delenv("LOG_LEVEL", raising=False)
    logger = create_default_logger("default-level-test")

    logger.debug("무시")

    assert logger.is_enabled_for(LogLevel.DEBUG) is False
    assert logger.is_enabled_for(LogLevel.INFO) is True
    assert logger.repository.list() == []
