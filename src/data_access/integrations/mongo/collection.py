"""
목적: 모델 단위 작업을 제공하는 MongoDB 컬렉션 래퍼를 제공한다.
설명: pymongo 컬렉션을 감싸 훅이 결합된 CRUD와 간단한 집계 헬퍼를 노출한다.
    선택적으로 `ClientSession`을 받아 모든 호출에 전달한다.
디자인 패턴: 어댑터 패턴
참조: src/data_access/integrations/mongo/operations.py, src/data_access/integrations/mongo/builder.py
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Type, TypeVar, Union

from pymongo.client_session import ClientSession
from pymongo.collection import Collection as PyMongoCollection
from pymongo.command_cursor import CommandCursor
from pymongo.results import DeleteResult, UpdateResult

from data_access.integrations.mongo import operations
from data_access.integrations.mongo.builder import Operator, to_pipeline
from data_access.integrations.mongo.fields import ID
from data_access.integrations.mongo.model import Model

ModelT = TypeVar("ModelT", bound=Model)
StageLike = Union[Operator, Mapping[str, Any]]


class Collection:
    """모델 작업용 컬렉션 래퍼.

    Args:
        collection: pymongo 컬렉션.
        session: 모든 호출에 전달할 세션.
    """

    def __init__(
        self,
        collection: PyMongoCollection,
        session: Optional[ClientSession] = None,
    ) -> None:
        self._collection = collection
        self._session = session

    @property
    def raw(self) -> PyMongoCollection:
        """감싸고 있는 pymongo 컬렉션을 반환한다."""

        return self._collection

    @property
    def name(self) -> str:
        return self._collection.name

    def with_session(self, session: Optional[ClientSession]) -> "Collection":
        """세션이 바인딩된 새 래퍼를 반환한다."""

        return Collection(self._collection, session=session)

    def find_by_id(self, id: Any, model_cls: Type[ModelT], **kwargs: Any) -> Optional[ModelT]:
        return operations.first(
            self._collection, {ID: id}, model_cls, session=self._session, **kwargs
        )

    def first(
        self,
        filter: Mapping[str, Any],
        model_cls: Type[ModelT],
        **kwargs: Any,
    ) -> Optional[ModelT]:
        return operations.first(
            self._collection, filter, model_cls, session=self._session, **kwargs
        )

    def create(self, model: Model, **kwargs: Any) -> Any:
        return operations.create(self._collection, model, session=self._session, **kwargs)

    def update(self, model: Model, **kwargs: Any) -> UpdateResult:
        return operations.update(self._collection, model, session=self._session, **kwargs)

    def patch(self, model: Model, fields: Mapping[str, Any], **kwargs: Any) -> UpdateResult:
        return operations.patch(
            self._collection, model, fields, session=self._session, **kwargs
        )

    def delete(self, model: Model) -> DeleteResult:
        return operations.delete_by_id(self._collection, model, session=self._session)

    def find_all(
        self,
        filter: Optional[Mapping[str, Any]] = None,
        model_cls: Optional[Type[ModelT]] = None,
        **kwargs: Any,
    ) -> list[Any]:
        return operations.find_all(
            self._collection,
            filter or {},
            model_cls,
            session=self._session,
            **kwargs,
        )

    def simple_aggregate_cursor(self, *stages: StageLike) -> CommandCursor:
        """스테이지 빌더와 원시 스테이지를 섞어 집계하고 커서를 반환한다."""

        return self._collection.aggregate(to_pipeline(stages), session=self._session)

    def simple_aggregate(self, *stages: StageLike) -> list[dict[str, Any]]:
        return list(self.simple_aggregate_cursor(*stages))

    def simple_aggregate_first(self, *stages: StageLike) -> Optional[dict[str, Any]]:
        """첫 번째 집계 결과를 반환한다. 결과가 없으면 `None`."""

        cursor = self.simple_aggregate_cursor(*stages)
        try:
            return next(cursor, None)
        finally:
            cursor.close()
