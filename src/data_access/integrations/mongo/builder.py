"""
목적: 집계 파이프라인 스테이지 빌더를 제공한다.
설명: `Operator` 인터페이스(`key`/`value`)를 구현한 스테이지 객체를 `{key: value}` 사전으로 변환한다.
    `Collection.simple_aggregate*`는 원시 사전과 빌더 객체를 섞어서 받을 수 있다.
디자인 패턴: 빌더 패턴
참조: src/data_access/integrations/mongo/fields.py, src/data_access/integrations/mongo/collection.py
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional, Sequence, Union

from data_access.integrations.mongo.fields import Stage


class Operator(ABC):
    """집계 스테이지 연산자 인터페이스."""

    @abstractmethod
    def key(self) -> str:
        """스테이지 연산자 이름을 반환한다."""

    @abstractmethod
    def value(self) -> Any:
        """스테이지 본문을 반환한다."""


def to_stage(operator: Operator) -> dict[str, Any]:
    """연산자를 파이프라인 스테이지 사전으로 변환한다."""

    return {operator.key(): operator.value()}


def append_not_none(target: dict[str, Any], key: str, value: Any) -> None:
    """값이 `None`이 아닐 때만 사전에 추가한다."""

    if value is not None:
        target[key] = value


def to_pipeline(stages: Sequence[Union[Operator, Mapping[str, Any]]]) -> list[Any]:
    """빌더 객체와 원시 스테이지가 섞인 목록을 파이프라인으로 변환한다."""

    pipeline: list[Any] = []
    for stage in stages:
        if isinstance(stage, Operator):
            pipeline.append(to_stage(stage))
        else:
            pipeline.append(stage)
    return pipeline


class Match(Operator):
    def __init__(self, filter: Mapping[str, Any]) -> None:
        self._filter = dict(filter)

    def key(self) -> str:
        return Stage.MATCH

    def value(self) -> Any:
        return self._filter


class Sort(Operator):
    """`(필드, 방향)` 쌍을 호출 순서대로 유지한다."""

    def __init__(self, *keys: tuple[str, int]) -> None:
        self._keys = list(keys)

    def key(self) -> str:
        return Stage.SORT

    def value(self) -> Any:
        return {name: direction for name, direction in self._keys}


class Limit(Operator):
    def __init__(self, limit: int) -> None:
        self._limit = limit

    def key(self) -> str:
        return Stage.LIMIT

    def value(self) -> Any:
        return self._limit


class Skip(Operator):
    def __init__(self, skip: int) -> None:
        self._skip = skip

    def key(self) -> str:
        return Stage.SKIP

    def value(self) -> Any:
        return self._skip


class Project(Operator):
    def __init__(self, projection: Mapping[str, Any]) -> None:
        self._projection = dict(projection)

    def key(self) -> str:
        return Stage.PROJECT

    def value(self) -> Any:
        return self._projection


class Group(Operator):
    """`$group` 스테이지. `accumulators`는 `{필드: {누산기: 식}}` 형식이다."""

    def __init__(self, id: Any, accumulators: Optional[Mapping[str, Any]] = None) -> None:
        self._id = id
        self._accumulators = dict(accumulators or {})

    def key(self) -> str:
        return Stage.GROUP

    def value(self) -> Any:
        body: dict[str, Any] = {"_id": self._id}
        body.update(self._accumulators)
        return body


class Lookup(Operator):
    """`$lookup` 스테이지. 지정되지 않은 항목은 생략한다."""

    def __init__(
        self,
        from_: str,
        as_: str,
        local_field: Optional[str] = None,
        foreign_field: Optional[str] = None,
        let: Optional[Mapping[str, Any]] = None,
        pipeline: Optional[Sequence[Any]] = None,
    ) -> None:
        self._from = from_
        self._as = as_
        self._local_field = local_field
        self._foreign_field = foreign_field
        self._let = dict(let) if let is not None else None
        self._pipeline = list(pipeline) if pipeline is not None else None

    def key(self) -> str:
        return Stage.LOOKUP

    def value(self) -> Any:
        body: dict[str, Any] = {"from": self._from}
        append_not_none(body, "localField", self._local_field)
        append_not_none(body, "foreignField", self._foreign_field)
        append_not_none(body, "let", self._let)
        append_not_none(body, "pipeline", self._pipeline)
        body["as"] = self._as
        return body


class Unwind(Operator):
    def __init__(
        self,
        path: str,
        include_array_index: Optional[str] = None,
        preserve_null_and_empty_arrays: Optional[bool] = None,
    ) -> None:
        self._path = path
        self._include_array_index = include_array_index
        self._preserve = preserve_null_and_empty_arrays

    def key(self) -> str:
        return Stage.UNWIND

    def value(self) -> Any:
        if self._include_array_index is None and self._preserve is None:
            return self._path
        body: dict[str, Any] = {"path": self._path}
        append_not_none(body, "includeArrayIndex", self._include_array_index)
        append_not_none(body, "preserveNullAndEmptyArrays", self._preserve)
        return body


class Count(Operator):
    def __init__(self, field: str) -> None:
        self._field = field

    def key(self) -> str:
        return Stage.COUNT

    def value(self) -> Any:
        return self._field
