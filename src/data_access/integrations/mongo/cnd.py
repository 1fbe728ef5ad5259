"""
목적: MongoDB 조건 빌더를 제공한다.
설명: 체이닝 호출로 필터/정렬/프로젝션/페이징을 누적하고, 호출 시점에 pymongo 인자로 변환한다.
    변환은 부수 효과가 없어 count와 find에 같은 조건을 반복 사용할 수 있다.
디자인 패턴: 빌더 패턴
참조: src/data_access/integrations/paging.py, src/data_access/integrations/mongo/fields.py
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping, Optional, Sequence, Type, TypeVar

from pymongo.collection import Collection as PyMongoCollection

from data_access.integrations.mongo.fields import QueryOperator, Stage
from data_access.integrations.mongo.model import Model
from data_access.integrations.paging import Paging
from data_access.shared.logging import LogContext, Logger, create_default_logger

ModelT = TypeVar("ModelT", bound=Model)

ASC = 1
DESC = -1


class MongoCnd:
    """MongoDB 조건 빌더.

    단일 요청 안에서 만들고 소비하는 누적기이며 동시 수정에 안전하지 않다.

    Args:
        logger: 종료 연산 실패를 기록할 로거.
    """

    def __init__(self, logger: Optional[Logger] = None) -> None:
        self._logger = logger or create_default_logger("MongoCnd")
        self._filters: list[tuple[str, Any]] = []
        self._select_cols: list[str] = []
        self._sorts: list[tuple[str, int]] = []
        self._paging: Optional[Paging] = None

    @property
    def paging(self) -> Optional[Paging]:
        return self._paging

    def cols(self, *columns: str) -> "MongoCnd":
        self._select_cols.extend(columns)
        return self

    def eq(self, column: str, value: Any) -> "MongoCnd":
        self._filters.append((column, value))
        return self

    def not_eq(self, column: str, value: Any) -> "MongoCnd":
        return self._append(column, {QueryOperator.NE: value})

    def gt(self, column: str, value: Any) -> "MongoCnd":
        return self._append(column, {QueryOperator.GT: value})

    def gte(self, column: str, value: Any) -> "MongoCnd":
        return self._append(column, {QueryOperator.GTE: value})

    def lt(self, column: str, value: Any) -> "MongoCnd":
        return self._append(column, {QueryOperator.LT: value})

    def lte(self, column: str, value: Any) -> "MongoCnd":
        return self._append(column, {QueryOperator.LTE: value})

    def like(self, column: str, pattern: str) -> "MongoCnd":
        """대소문자를 구분하지 않는 정규식 매칭."""

        return self._append(
            column, {QueryOperator.REGEX: pattern, QueryOperator.OPTIONS: "i"}
        )

    def in_(self, column: str, values: Iterable[Any]) -> "MongoCnd":
        return self._append(column, {QueryOperator.IN: list(values)})

    def not_in(self, column: str, values: Iterable[Any]) -> "MongoCnd":
        return self._append(column, {QueryOperator.NIN: list(values)})

    def asc(self, column: str) -> "MongoCnd":
        self._sorts.append((column, ASC))
        return self

    def desc(self, column: str) -> "MongoCnd":
        self._sorts.append((column, DESC))
        return self

    def page(self, page: int, limit: int) -> "MongoCnd":
        self._paging = Paging(page=page, limit=limit)
        return self

    def limit(self, limit: int) -> "MongoCnd":
        return self.page(1, limit)

    def build_filter(self) -> dict[str, Any]:
        """필터 문서를 생성한다.

        같은 컬럼이 여러 번 조건에 쓰이면 모든 조건을 입력 순서대로 `$and`로 묶는다.
        """

        columns = [column for column, _ in self._filters]
        if len(set(columns)) != len(columns):
            return {QueryOperator.AND: [{column: value} for column, value in self._filters]}
        return {column: value for column, value in self._filters}

    def build_projection(self) -> Optional[dict[str, int]]:
        if not self._select_cols:
            return None
        return {column: 1 for column in self._select_cols}

    def build_sort(self) -> Optional[list[tuple[str, int]]]:
        if not self._sorts:
            return None
        return list(self._sorts)

    def build_find_one_options(self) -> dict[str, Any]:
        options: dict[str, Any] = {}
        projection = self.build_projection()
        if projection is not None:
            options["projection"] = projection
        sort = self.build_sort()
        if sort is not None:
            options["sort"] = sort
        return options

    def build_find_options(self) -> dict[str, Any]:
        """`Collection.find`에 전달할 키워드 인자를 생성한다."""

        options = self.build_find_one_options()
        if self._paging is not None:
            if self._paging.has_limit:
                options["limit"] = self._paging.limit
            if self._paging.has_offset:
                options["skip"] = self._paging.offset
        return options

    def build_pipeline(self, pipeline: Optional[Sequence[Mapping[str, Any]]] = None) -> list[Any]:
        """조건을 집계 파이프라인에 반영한다.

        `$match`는 맨 앞에, `$sort`/`$skip`/`$limit`은 맨 뒤에 붙는다.
        """

        stages: list[Any] = list(pipeline or [])
        if self._filters:
            stages.insert(0, {Stage.MATCH: self.build_filter()})
        if self._sorts:
            stages.append({Stage.SORT: {column: direction for column, direction in self._sorts}})
        if self._paging is not None:
            if self._paging.has_offset:
                stages.append({Stage.SKIP: self._paging.offset})
            if self._paging.has_limit:
                stages.append({Stage.LIMIT: self._paging.limit})
        return stages

    def find(
        self,
        coll: PyMongoCollection,
        model_cls: Optional[Type[ModelT]] = None,
    ) -> list[Any]:
        """조건에 맞는 문서 목록을 조회한다. 모델 클래스가 주어지면 모델로 변환한다."""

        try:
            documents = list(coll.find(self.build_filter(), **self.build_find_options()))
        except Exception as exc:
            self._log_failure("find", coll, exc)
            raise
        return self._convert(documents, model_cls)

    def find_one(
        self,
        coll: PyMongoCollection,
        model_cls: Optional[Type[ModelT]] = None,
    ) -> Any:
        try:
            document = coll.find_one(self.build_filter(), **self.build_find_one_options())
        except Exception as exc:
            self._log_failure("find_one", coll, exc)
            raise
        if document is None or model_cls is None:
            return document
        return model_cls.from_document(document)

    def count(self, coll: PyMongoCollection) -> int:
        try:
            return coll.count_documents(self.build_filter())
        except Exception as exc:
            self._log_failure("count", coll, exc)
            raise

    def aggregate(
        self,
        coll: PyMongoCollection,
        pipeline: Sequence[Mapping[str, Any]],
    ) -> list[dict[str, Any]]:
        """주어진 파이프라인을 그대로 실행한다."""

        try:
            return list(coll.aggregate(list(pipeline)))
        except Exception as exc:
            self._log_failure("aggregate", coll, exc)
            raise

    def aggregate_with_conditions(
        self,
        coll: PyMongoCollection,
        pipeline: Optional[Sequence[Mapping[str, Any]]] = None,
    ) -> list[dict[str, Any]]:
        try:
            return list(coll.aggregate(self.build_pipeline(pipeline)))
        except Exception as exc:
            self._log_failure("aggregate_with_conditions", coll, exc)
            raise

    def _append(self, column: str, expression: Mapping[str, Any]) -> "MongoCnd":
        self._filters.append((column, dict(expression)))
        return self

    def _convert(self, documents: list[Any], model_cls: Optional[Type[ModelT]]) -> list[Any]:
        if model_cls is None:
            return documents
        return [model_cls.from_document(document) for document in documents]

    def _log_failure(self, operation: str, coll: PyMongoCollection, exc: Exception) -> None:
        self._logger.error(
            f"MongoDB {operation} 실패: {exc}",
            context=LogContext(collection=coll.name, operation=operation),
            metadata={"error_type": type(exc).__name__},
        )
