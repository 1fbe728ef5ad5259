"""
목적: MongoDB 연결 설정 모델을 제공한다.
설명: 주소/계정/TLS 인증서 경로/커넥션 풀 크기를 검증하고 설정 로더 결과를 모델로 변환한다.
디자인 패턴: 데이터 전송 객체(DTO)
참조: src/data_access/integrations/mongo/connection.py, src/data_access/shared/config/loader.py
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from data_access.shared.config import ConfigLoader


class MongoTLSConfig(BaseModel):
    """상호 TLS 인증서 경로 설정.

    세 경로가 모두 지정된 경우에만 TLS가 활성화된다.
    """

    model_config = ConfigDict(coerce_numbers_to_str=True)

    ca_cert: str = ""
    client_cert: str = ""
    client_cert_key: str = ""

    @property
    def enabled(self) -> bool:
        return bool(self.ca_cert and self.client_cert and self.client_cert_key)


class MongoConfig(BaseModel):
    """MongoDB 연결 설정.

    Args:
        address: `host:port` 또는 쉼표로 구분된 레플리카셋 주소.
        database: 기본 데이터베이스 이름.
        account: 계정. 비밀번호와 함께 지정된 경우에만 인증한다.
        password: 비밀번호.
        tls: 상호 TLS 인증서 설정.
        mode: 클러스터 모드 여부. 연결에는 사용하지 않는다.
        max_open_connects: 동시에 연결을 맺을 수 있는 최대 수(`maxConnecting`).
        max_idle_connects: 풀 최대 크기(`maxPoolSize`).
        conn_max_life_time: 유휴 연결 유지 시간(초).
    """

    model_config = ConfigDict(coerce_numbers_to_str=True)

    address: str = Field(..., min_length=1)
    database: str = Field(..., min_length=1)
    account: str = ""
    password: str = ""
    tls: MongoTLSConfig = Field(default_factory=MongoTLSConfig)
    mode: bool = False
    max_open_connects: int = 0
    max_idle_connects: int = 0
    conn_max_life_time: int = 0

    @property
    def has_credentials(self) -> bool:
        return bool(self.account and self.password)

    @property
    def uri(self) -> str:
        return f"mongodb://{self.address}"

    @classmethod
    def from_loader(cls, loader: ConfigLoader, section: str = "mongo") -> "MongoConfig":
        """설정 로더의 섹션을 검증해 설정 모델을 생성한다."""

        return cls.model_validate(loader.build_section(section))
