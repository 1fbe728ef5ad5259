"""
목적: 단일 문서 CRUD에 생명주기 훅을 결합한 연산을 제공한다.
설명: pymongo 컬렉션 호출 하나를 전/후 훅 호출로 감싼다. 트랜잭션이나 보상 처리는 하지 않는다.
디자인 패턴: 템플릿 메서드
참조: src/data_access/integrations/mongo/hooks.py, src/data_access/integrations/mongo/collection.py
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Type, TypeVar

from pymongo.client_session import ClientSession
from pymongo.collection import Collection as PyMongoCollection
from pymongo.results import DeleteResult, UpdateResult

from data_access.integrations.mongo.fields import ID, UpdateOperator
from data_access.integrations.mongo.hooks import (
    after_create_hooks,
    after_delete_hooks,
    after_update_hooks,
    before_create_hooks,
    before_delete_hooks,
    before_update_hooks,
)
from data_access.integrations.mongo.model import Model

ModelT = TypeVar("ModelT", bound=Model)


def create(
    coll: PyMongoCollection,
    model: Model,
    session: Optional[ClientSession] = None,
    **kwargs: Any,
) -> Any:
    """모델을 삽입하고 삽입된 식별자를 반환한다.

    삽입 후 훅이 실패해도 삽입된 문서는 남는다.
    """

    before_create_hooks(model)
    model.set_id(model.prepare_id(model.get_id()))
    result = coll.insert_one(model.to_document(), session=session, **kwargs)
    model.set_id(str(result.inserted_id))
    after_create_hooks(model)
    return result.inserted_id


def first(
    coll: PyMongoCollection,
    filter: Mapping[str, Any],
    model_cls: Type[ModelT],
    session: Optional[ClientSession] = None,
    **kwargs: Any,
) -> Optional[ModelT]:
    document = coll.find_one(filter, session=session, **kwargs)
    if document is None:
        return None
    return model_cls.from_document(document)


def update(
    coll: PyMongoCollection,
    model: Model,
    session: Optional[ClientSession] = None,
    **kwargs: Any,
) -> UpdateResult:
    """모델 전체 문서를 `$set`으로 덮어쓴다. 마지막 쓰기가 이긴다."""

    before_update_hooks(model)
    result = coll.update_one(
        {ID: model.get_id()},
        {UpdateOperator.SET: model.to_document()},
        session=session,
        **kwargs,
    )
    after_update_hooks(model, result)
    return result


def patch(
    coll: PyMongoCollection,
    model: Model,
    fields: Mapping[str, Any],
    session: Optional[ClientSession] = None,
    **kwargs: Any,
) -> UpdateResult:
    """지정한 필드만 `$set`으로 갱신한다."""

    before_update_hooks(model)
    result = coll.update_one(
        {ID: model.get_id()},
        {UpdateOperator.SET: dict(fields)},
        session=session,
        **kwargs,
    )
    after_update_hooks(model, result)
    return result


def delete_by_id(
    coll: PyMongoCollection,
    model: Model,
    session: Optional[ClientSession] = None,
) -> DeleteResult:
    before_delete_hooks(model)
    result = coll.delete_one({ID: model.get_id()}, session=session)
    after_delete_hooks(model, result)
    return result


def find_all(
    coll: PyMongoCollection,
    filter: Mapping[str, Any],
    model_cls: Optional[Type[ModelT]] = None,
    session: Optional[ClientSession] = None,
    **kwargs: Any,
) -> list[Any]:
    """필터에 맞는 문서를 모두 조회한다. 모델 클래스가 주어지면 모델로 변환한다."""

    documents = list(coll.find(filter, session=session, **kwargs))
    if model_cls is None:
        return documents
    return [model_cls.from_document(document) for document in documents]
