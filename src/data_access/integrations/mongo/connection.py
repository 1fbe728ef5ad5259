"""
목적: MongoDB 연결 관리 모듈을 제공한다.
설명: 설정으로부터 클라이언트 옵션을 구성하고 연결/핑/컬렉션·인덱스 보장/종료를 담당한다.
    연결 핸들은 전역 변수가 아니라 관리자 객체가 소유하며 필요한 곳에 주입한다.
디자인 패턴: 매니저 패턴
참조: src/data_access/integrations/mongo/config.py, src/data_access/integrations/mongo/indexes.py
"""

from __future__ import annotations

import os
import ssl
import tempfile
from datetime import datetime
from typing import Any, Optional, Type

from pymongo import MongoClient
from pymongo.database import Database
from pymongo.monitoring import (
    CommandFailedEvent,
    CommandListener,
    CommandStartedEvent,
    CommandSucceededEvent,
)

from data_access.integrations.mongo.collection import Collection
from data_access.integrations.mongo.config import MongoConfig
from data_access.integrations.mongo.model import Model
from data_access.shared.logging import LogContext, Logger, LogLevel, create_default_logger

_SERVER_SELECTION_TIMEOUT_MS = 10_000


class CommandLogListener(CommandListener):
    """드라이버 명령 이벤트를 DEBUG 레벨로 기록한다. DEBUG가 꺼져 있으면 아무것도 보관하지 않는다."""

    def __init__(self, logger: Logger) -> None:
        self._logger = logger
        self._statements: dict[int, str] = {}

    def started(self, event: CommandStartedEvent) -> None:
        if not self._logger.is_enabled_for(LogLevel.DEBUG):
            return
        self._statements[event.request_id] = str(event.command)

    def succeeded(self, event: CommandSucceededEvent) -> None:
        if not self._logger.is_enabled_for(LogLevel.DEBUG):
            return
        statement = self._statements.pop(event.request_id, "")
        self._logger.debug(
            f"MongoDB 명령 성공: {event.command_name}",
            context=self._context(event),
            metadata={"duration_micros": event.duration_micros, "statement": statement},
        )

    def failed(self, event: CommandFailedEvent) -> None:
        if not self._logger.is_enabled_for(LogLevel.DEBUG):
            return
        statement = self._statements.pop(event.request_id, "")
        self._logger.debug(
            f"MongoDB 명령 실패: {event.command_name}",
            context=self._context(event),
            metadata={
                "duration_micros": event.duration_micros,
                "statement": statement,
                "failure": event.failure,
            },
        )

    def _context(self, event: Any) -> LogContext:
        return LogContext(
            request_id=str(event.request_id),
            database=getattr(event, "database_name", None),
            operation=event.command_name,
        )


class MongoConnectionManager:
    """MongoDB 연결 관리자.

    Args:
        config: 연결 설정.
        logger: 주입 가능한 로거.
        mongo_client_cls: 클라이언트 클래스. 테스트에서 대체할 수 있다.
    """

    def __init__(
        self,
        config: MongoConfig,
        logger: Optional[Logger] = None,
        mongo_client_cls: Type[MongoClient] = MongoClient,
    ) -> None:
        self._config = config
        self._logger = logger or create_default_logger("MongoConnectionManager")
        self._mongo_client_cls = mongo_client_cls
        self._client: Optional[MongoClient] = None
        self._database: Optional[Database] = None
        self._combined_pem_path: Optional[str] = None

    @property
    def config(self) -> MongoConfig:
        return self._config

    @property
    def client(self) -> MongoClient:
        if self._client is None:
            raise RuntimeError("MongoDB 연결이 초기화되지 않았습니다.")
        return self._client

    @property
    def database(self) -> Database:
        """초기화된 MongoDB 데이터베이스 객체를 반환한다."""

        if self._database is None:
            raise RuntimeError("MongoDB 연결이 초기화되지 않았습니다.")
        return self._database

    def build_client_options(self) -> dict[str, Any]:
        """설정으로부터 `MongoClient` 키워드 인자를 구성한다.

        TLS 인증서는 이 시점에 읽어서 검증하며, 실패하면 예외가 그대로 전파된다.
        """

        config = self._config
        options: dict[str, Any] = {
            "tz_aware": True,
            "tzinfo": datetime.now().astimezone().tzinfo,
            "serverSelectionTimeoutMS": _SERVER_SELECTION_TIMEOUT_MS,
            "event_listeners": [CommandLogListener(self._logger)],
        }
        if config.has_credentials:
            options["username"] = config.account
            options["password"] = config.password
        if config.tls.enabled:
            options.update(self._build_tls_options())
        if config.max_open_connects > 0:
            options["maxConnecting"] = config.max_open_connects
        if config.max_idle_connects > 0:
            options["maxPoolSize"] = config.max_idle_connects
        if config.conn_max_life_time > 0:
            options["maxIdleTimeMS"] = config.conn_max_life_time * 1000
        return options

    def connect(self) -> Database:
        """클라이언트를 생성하고 핑으로 연결을 확인한다."""

        if self._database is not None:
            return self._database
        options = self.build_client_options()
        client: Optional[MongoClient] = None
        try:
            client = self._mongo_client_cls(self._config.uri, **options)
            client.admin.command("ping")
        except Exception as exc:
            self._logger.error(
                f"MongoDB 연결 실패: {exc}",
                context=LogContext(database=self._config.database, operation="connect"),
            )
            if client is not None:
                client.close()
            self._remove_combined_pem()
            raise
        self._client = client
        self._database = client[self._config.database]
        self._logger.info(
            "MongoDB 연결이 초기화되었습니다.",
            context=LogContext(database=self._config.database, operation="connect"),
            metadata={"address": self._config.address},
        )
        return self._database

    def close(self) -> None:
        """MongoDB 연결을 종료한다."""

        if self._client is not None:
            self._client.close()
            self._client = None
            self._database = None
            self._logger.info("MongoDB 연결이 종료되었습니다.")
        self._remove_combined_pem()

    def collection(self, name: str) -> Collection:
        return Collection(self.database[name])

    def coll(self, model: Model | Type[Model]) -> Collection:
        """모델(또는 모델 클래스)이 선언한 컬렉션의 래퍼를 반환한다."""

        return self.collection(model.collection_name())

    def ensure_models(self, *models: Model | Type[Model]) -> None:
        """모델이 선언한 컬렉션과 인덱스가 존재하도록 보장한다."""

        database = self.database
        for model in models:
            name = model.collection_name()
            context = LogContext(database=database.name, collection=name, operation="ensure")
            try:
                if not database.list_collection_names(filter={"name": name}):
                    database.create_collection(name)
                    self._logger.info(f"MongoDB 컬렉션 생성 완료: {name}", context=context)
                index_models = [spec.to_index_model() for spec in model.index_specs()]
                if index_models:
                    database[name].create_indexes(index_models)
                    self._logger.info(
                        f"MongoDB 인덱스 생성 완료: {name}",
                        context=context,
                        metadata={"indexes": [spec.name for spec in model.index_specs()]},
                    )
            except Exception as exc:
                self._logger.error(f"MongoDB 컬렉션/인덱스 보장 실패: {exc}", context=context)
                raise

    def _build_tls_options(self) -> dict[str, Any]:
        tls = self._config.tls
        ssl_context = ssl.create_default_context(cafile=tls.ca_cert)
        ssl_context.load_cert_chain(certfile=tls.client_cert, keyfile=tls.client_cert_key)
        return {
            "tls": True,
            "tlsCAFile": tls.ca_cert,
            "tlsCertificateKeyFile": self._certificate_key_file(),
        }

    def _certificate_key_file(self) -> str:
        # 드라이버는 인증서와 키가 하나의 PEM 파일에 있어야 한다.
        tls = self._config.tls
        if os.path.abspath(tls.client_cert) == os.path.abspath(tls.client_cert_key):
            return tls.client_cert
        if self._combined_pem_path is not None:
            return self._combined_pem_path
        with open(tls.client_cert, "r", encoding="utf-8") as cert_handle:
            cert_pem = cert_handle.read()
        with open(tls.client_cert_key, "r", encoding="utf-8") as key_handle:
            key_pem = key_handle.read()
        fd, path = tempfile.mkstemp(prefix="mongo-client-", suffix=".pem")
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            handle.write(cert_pem.rstrip("\n") + "\n" + key_pem)
        self._combined_pem_path = path
        return path

    def _remove_combined_pem(self) -> None:
        if self._combined_pem_path is None:
            return
        try:
            os.remove(self._combined_pem_path)
        except FileNotFoundError:
            pass
        self._combined_pem_path = None


def init_mongo(
    config: MongoConfig,
    *models: Model | Type[Model],
    logger: Optional[Logger] = None,
) -> MongoConnectionManager:
    """연결, 핑, 모델 컬렉션/인덱스 보장을 한 번에 수행한다."""

    manager = MongoConnectionManager(config, logger=logger)
    manager.connect()
    try:
        manager.ensure_models(*models)
    except Exception:
        manager.close()
        raise
    return manager
