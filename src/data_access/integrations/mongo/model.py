"""
목적: MongoDB 모델 계약과 기본 모델을 제공한다.
설명: 식별자 계약(`get_id`/`set_id`/`prepare_id`)과 컬렉션 이름/인덱스 선언을 정의한다.
    컬렉션 이름과 인덱스는 리플렉션 대신 클래스 속성 `__collection__`, `__indexes__`로 명시한다.
디자인 패턴: 템플릿 메서드, 믹스인
참조: src/data_access/integrations/mongo/hooks.py, src/data_access/integrations/mongo/indexes.py
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, ClassVar, Mapping, Optional, Sequence

from bson import ObjectId
from pydantic import BaseModel, ConfigDict, Field, field_validator

from data_access.integrations.mongo.fields import ID
from data_access.integrations.mongo.hooks import CreatingHook, SavingHook
from data_access.integrations.mongo.indexes import IndexSpec
from data_access.shared.exceptions import ModelDeclarationError


class Model(BaseModel, ABC):
    """MongoDB에 저장되는 모델의 기반 클래스.

    하위 클래스는 `__collection__`으로 컬렉션 이름을, `__indexes__`로 인덱스를 선언한다.
    """

    model_config = ConfigDict(populate_by_name=True, arbitrary_types_allowed=True)

    __collection__: ClassVar[Optional[str]] = None
    __indexes__: ClassVar[Sequence[IndexSpec]] = ()

    @abstractmethod
    def get_id(self) -> str:
        """현재 식별자를 반환한다."""

    @abstractmethod
    def set_id(self, id: str) -> None:
        """식별자를 설정한다."""

    @abstractmethod
    def prepare_id(self, id: Any) -> str:
        """저장 전에 식별자를 검증하거나 생성해서 반환한다."""

    @classmethod
    def collection_name(cls) -> str:
        name = cls.__collection__
        if not name:
            raise ModelDeclarationError(cls.__name__, "__collection__ 이 선언되지 않았습니다.")
        return name

    @classmethod
    def index_specs(cls) -> list[IndexSpec]:
        return list(cls.__indexes__)

    def to_document(self) -> dict[str, Any]:
        """저장용 문서로 변환한다."""

        return self.model_dump(by_alias=True)

    @classmethod
    def from_document(cls, document: Mapping[str, Any]) -> "Model":
        """조회한 문서를 모델로 변환한다."""

        return cls.model_validate(dict(document))


class IDField(Model):
    """`_id` 필드와 식별자 계약의 기본 구현."""

    id: str = Field(default="", alias=ID)

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_object_id(cls, value: Any) -> Any:
        if isinstance(value, ObjectId):
            return str(value)
        return value

    def get_id(self) -> str:
        return self.id

    def set_id(self, id: str) -> None:
        self.id = id

    def prepare_id(self, id: Any) -> str:
        """비어 있으면 새 ObjectId 16진 문자열을 생성한다."""

        if id is None or id == "":
            return str(ObjectId())
        if not isinstance(id, str):
            raise TypeError(f"식별자는 문자열이어야 합니다: {type(id).__name__}")
        return id


class DateFields(BaseModel):
    """생성/수정 시각 필드. 시각은 로컬 타임존 기준으로 기록한다."""

    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def creating(self) -> None:
        self.created_at = datetime.now().astimezone()

    def saving(self) -> None:
        self.updated_at = datetime.now().astimezone()


class TenantIdField(BaseModel):
    tenant_id: str = ""


class DefaultModel(IDField, DateFields, CreatingHook, SavingHook):
    """식별자와 생성/수정 시각을 기본 제공하는 모델."""

    def creating(self) -> None:
        DateFields.creating(self)

    def saving(self) -> None:
        DateFields.saving(self)


class DefaultTenantModel(DefaultModel, TenantIdField):
    """멀티 테넌트 시스템용 기본 모델."""
