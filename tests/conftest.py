"""
목적: 테스트 공통 환경/로깅 훅을 제공한다.
설명: 선택적 .env 로딩, MongoDB 라이브 테스트 설정 픽스처, 세션/테스트 단위 로깅 훅을 함께 제공한다.
디자인 패턴: 테스트 픽스처 + 테스트 훅
참조: pyproject.toml, tests/integrations/mongo/test_mongo_live.py
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import pytest
from dotenv import load_dotenv

from data_access.integrations.mongo import MongoConfig

_LOGGER = logging.getLogger("tests")
_PROJECT_ROOT = Path(__file__).resolve().parents[1]


def _load_env_files() -> None:
    """루트 .env가 있으면 로딩한다. 단위 테스트는 .env 없이도 동작한다."""

    env_path = _PROJECT_ROOT / ".env"
    if env_path.exists():
        load_dotenv(env_path, override=False)


_load_env_files()


@pytest.fixture(scope="session")
def mongo_live_config() -> MongoConfig:
    """`MONGODB_ADDRESS`/`MONGODB_DATABASE`가 없으면 라이브 테스트를 건너뛴다."""

    address = os.getenv("MONGODB_ADDRESS")
    database = os.getenv("MONGODB_DATABASE")
    if not address or not database:
        pytest.skip("MONGODB_ADDRESS, MONGODB_DATABASE 환경 변수가 필요합니다.")
    return MongoConfig(
        address=address,
        database=database,
        account=os.getenv("MONGODB_ACCOUNT", ""),
        password=os.getenv("MONGODB_PASSWORD", ""),
    )


def pytest_sessionstart(session) -> None:  # noqa: D401 - pytest 훅 시그니처 유지
    """테스트 세션 시작을 로깅한다."""

    _LOGGER.info("테스트 세션 시작")


def pytest_sessionfinish(session, exitstatus: int) -> None:  # noqa: D401 - pytest 훅 시그니처 유지
    """테스트 세션 종료를 로깅한다."""

    _LOGGER.info("테스트 세션 종료 (exitstatus=%s)", exitstatus)


def pytest_runtest_logstart(nodeid: str, location) -> None:  # noqa: D401 - pytest 훅 시그니처 유지
    """각 테스트 시작을 로깅한다."""

    _LOGGER.info("테스트 시작: %s", nodeid)


def pytest_runtest_logreport(report) -> None:  # noqa: D401 - pytest 훅 시그니처 유지
    """테스트 결과를 로깅한다."""

    if report.when != "call":
        return
    if report.passed:
        _LOGGER.info("테스트 완료: %s", report.nodeid)
        return
    if report.skipped:
        _LOGGER.warning("테스트 스킵: %s", report.nodeid)
        return
    _LOGGER.error("테스트 실패: %s", report.nodeid)
