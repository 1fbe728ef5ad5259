"""
목적: 설정 로더와 런타임 환경 로더 동작을 검증한다.
설명: dict/JSON/환경 변수 병합 순서, 중첩 키 해석, 섹션 추출, 연결 설정 모델 변환, .env 로딩을 확인한다.
디자인 패턴: 빌더 패턴
참조: src/data_access/shared/config/loader.py, src/data_access/shared/config/runtime_env_loader.py
"""

from __future__ import annotations

import json
import os

import pytest

from data_access.integrations.mongo import MongoConfig
from data_access.integrations.sql import SqlConfig
from data_access.shared.config import ConfigLoader, RuntimeEnvironmentLoader


def test_config_loader_merges_sources_in_order(tmp_path) -> None:
    """나중 소스가 앞 소스를 덮어쓰고 중첩 사전은 병합되는지 확인한다."""

    config_path = tmp_path / "config.json"
    config_path.write_text(
        json.dumps({"mongo": {"address": "db:27017", "tls": {"ca_cert": "/a/ca.pem"}}}),
        encoding="utf-8",
    )

    merged = (
        ConfigLoader()
        .add_dict({"mongo": {"address": "localhost:27017", "database": "app"}})
        .add_json_file(str(config_path))
        .build(overrides={"mongo": {"max_idle_connects": 5}})
    )

    assert merged["mongo"]["address"] == "db:27017"
    assert merged["mongo"]["database"] == "app"
    assert merged["mongo"]["tls"]["ca_cert"] == "/a/ca.pem"
    assert merged["mongo"]["max_idle_connects"] == 5


def test_config_loader_reads_nested_env(monkeypatch) -> None:
    """`__` 구분자 환경 변수가 중첩 키로 해석되는지 확인한다."""

    monkeypatch.setenv("APPCFG_MONGO__ADDRESS", "mongo:27017")
    monkeypatch.setenv("APPCFG_MONGO__DATABASE", "app")
    monkeypatch.setenv("APPCFG_MONGO__PASSWORD", "1234")
    monkeypatch.setenv("APPCFG_MONGO__MAX_IDLE_CONNECTS", "10")
    monkeypatch.setenv("APPCFG_MONGO__TLS__CA_CERT", "/etc/ca.pem")

    loader = ConfigLoader().add_env(prefix="APPCFG_")
    section = loader.build_section("mongo")
    config = MongoConfig.from_loader(loader)

    assert section["max_idle_connects"] == 10
    assert config.address == "mongo:27017"
    assert config.password == "1234"
    assert config.max_idle_connects == 10
    assert config.tls.ca_cert == "/etc/ca.pem"
    assert config.tls.enabled is False


def test_config_loader_missing_required_json_file(tmp_path) -> None:
    """필수 JSON 파일이 없으면 실패하는지 확인한다."""

    with pytest.raises(FileNotFoundError):
        ConfigLoader().add_json_file(str(tmp_path / "missing.json"), required=True)


def test_config_loader_section_must_be_object() -> None:
    """섹션 값이 객체가 아니면 실패하는지 확인한다."""

    loader = ConfigLoader().add_dict({"sql": "sqlite://"})

    with pytest.raises(ValueError):
        loader.build_section("sql")


def test_sql_config_from_loader() -> None:
    """SQL 설정 섹션이 모델로 변환되는지 확인한다."""

    loader = ConfigLoader().add_dict({"sql": {"url": "sqlite:///:memory:", "echo_sql": True}})

    config = SqlConfig.from_loader(loader)

    assert config.url == "sqlite:///:memory:"
    assert config.echo_sql is True
    assert config.is_sqlite is True


def test_runtime_env_loader_loads_stage_file(tmp_path, monkeypatch) -> None:
    """ENV 값에 맞는 `.env.<env>` 파일이 로딩되는지 확인한다."""

    (tmp_path / ".env").write_text("DATA_ACCESS_ROOT_ONLY=root\n", encoding="utf-8")
    (tmp_path / ".env.dev").write_text("DATA_ACCESS_STAGE_ONLY=dev\n", encoding="utf-8")
    for key in ("APP_ENV", "APP_STAGE", "DATA_ACCESS_ROOT_ONLY", "DATA_ACCESS_STAGE_ONLY"):
        # 테스트 종료 시 로더가 추가한 값까지 제거되도록 기록해 둔다.
        monkeypatch.setenv(key, "placeholder")
        monkeypatch.delenv(key)
    monkeypatch.setenv("ENV", "development")

    runtime_env = RuntimeEnvironmentLoader(project_root=tmp_path).load()

    assert runtime_env == "dev"
    assert os.environ["ENV"] == "dev"
    assert os.environ["DATA_ACCESS_ROOT_ONLY"] == "root"
    assert os.environ["DATA_ACCESS_STAGE_ONLY"] == "dev"


def test_runtime_env_loader_requires_stage_file(tmp_path, monkeypatch) -> None:
    """`.env.<env>` 파일이 없으면 실패하는지 확인한다."""

    for key in ("APP_ENV", "APP_STAGE"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("ENV", "prod")

    with pytest.raises(FileNotFoundError):
        RuntimeEnvironmentLoader(project_root=tmp_path).load()


def test_runtime_env_loader_rejects_unknown_env(tmp_path, monkeypatch) -> None:
    """지원하지 않는 ENV 값은 실패하는지 확인한다."""

    for key in ("APP_ENV", "APP_STAGE"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("ENV", "qa")

    with pytest.raises(ValueError):
        RuntimeEnvironmentLoader(project_root=tmp_path).load()
