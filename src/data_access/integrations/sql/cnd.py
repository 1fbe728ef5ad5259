"""
목적: 관계형 DB 조건 빌더를 제공한다.
설명: 체이닝 호출로 WHERE/ORDER BY/LIMIT/OFFSET/컬럼 선택을 누적하고 SQLAlchemy `Select`에 적용한다.
    구조화된 조건과 `?` 위치 인자를 쓰는 원시 조각을 입력 순서대로 섞어 쓸 수 있다.
디자인 패턴: 빌더 패턴
참조: src/data_access/integrations/paging.py, src/data_access/integrations/sql/utils.py
"""

from __future__ import annotations

import operator
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Optional, Sequence, Type, TypeVar

from sqlalchemy import (
    Select,
    all_,
    any_,
    bindparam,
    cast,
    column,
    func,
    literal,
    select,
    text,
)
from sqlalchemy.dialects.postgresql import ARRAY
from sqlalchemy.orm import Session, load_only
from sqlalchemy.sql.elements import ColumnElement
from sqlalchemy.types import TEXT

from data_access.integrations.paging import Paging
from data_access.shared.logging import LogContext, Logger, create_default_logger

ModelT = TypeVar("ModelT")

_COMPARATORS: dict[str, Callable[[Any, Any], ColumnElement]] = {
    "=": operator.eq,
    "<>": operator.ne,
    ">": operator.gt,
    ">=": operator.ge,
    "<": operator.lt,
    "<=": operator.le,
}


@dataclass(frozen=True)
class _Predicate:
    """누적된 조건 하나. `build`가 호출될 때 SQLAlchemy 식으로 변환된다."""

    factory: Callable[[], ColumnElement]


@dataclass(frozen=True)
class _OrderBy:
    column: str
    asc: bool = True


@dataclass
class _State:
    select_cols: list[str] = field(default_factory=list)
    predicates: list[_Predicate] = field(default_factory=list)
    orders: list[_OrderBy] = field(default_factory=list)
    paging: Optional[Paging] = None


class SqlCnd:
    """SQLAlchemy 조건 빌더.

    Args:
        logger: 종료 연산 실패를 기록할 로거.
    """

    def __init__(self, logger: Optional[Logger] = None) -> None:
        self._logger = logger or create_default_logger("SqlCnd")
        self._state = _State()
        self._fragment_seq = 0

    @property
    def paging(self) -> Optional[Paging]:
        return self._state.paging

    def cols(self, *columns: str) -> "SqlCnd":
        self._state.select_cols.extend(columns)
        return self

    def eq(self, col: str, value: Any) -> "SqlCnd":
        return self._compare(col, "=", value)

    def not_eq(self, col: str, value: Any) -> "SqlCnd":
        return self._compare(col, "<>", value)

    def gt(self, col: str, value: Any) -> "SqlCnd":
        return self._compare(col, ">", value)

    def gte(self, col: str, value: Any) -> "SqlCnd":
        return self._compare(col, ">=", value)

    def lt(self, col: str, value: Any) -> "SqlCnd":
        return self._compare(col, "<", value)

    def lte(self, col: str, value: Any) -> "SqlCnd":
        return self._compare(col, "<=", value)

    def like(self, col: str, value: str) -> "SqlCnd":
        return self._add(lambda: column(col).like(f"%{value}%"))

    def starting(self, col: str, value: str) -> "SqlCnd":
        return self._add(lambda: column(col).like(f"{value}%"))

    def ending(self, col: str, value: str) -> "SqlCnd":
        return self._add(lambda: column(col).like(f"%{value}"))

    def in_(self, col: str, values: Iterable[Any]) -> "SqlCnd":
        items = list(values)
        return self._add(lambda: column(col).in_(items))

    def not_in(self, col: str, values: Iterable[Any]) -> "SqlCnd":
        items = list(values)
        return self._add(lambda: column(col).not_in(items))

    def find_in_set(self, col: str, value: Any) -> "SqlCnd":
        """쉼표로 구분된 텍스트 컬럼에 토큰이 포함되어 있는지 검사한다. MySQL/PostgreSQL 공용."""

        return self._add(lambda: _comma_wrapped(col).like(func.concat("%,", value, ",%")))

    def not_find_in_set(self, col: str, value: Any) -> "SqlCnd":
        return self._add(lambda: _comma_wrapped(col).not_like(func.concat("%,", value, ",%")))

    def pg_array_contains_all(self, col: str, values: Sequence[str]) -> "SqlCnd":
        """배열 컬럼이 모든 값을 포함한다(`@>`)."""

        items = list(values)
        return self._add(lambda: column(col).op("@>")(_text_array(items)))

    def pg_array_overlaps(self, col: str, values: Sequence[str]) -> "SqlCnd":
        """배열 컬럼과 값 목록에 교집합이 있다(`&&`)."""

        items = list(values)
        return self._add(lambda: column(col).op("&&")(_text_array(items)))

    def pg_array_contained_by(self, col: str, values: Sequence[str]) -> "SqlCnd":
        """배열 컬럼이 값 목록에 포함된다(`<@`)."""

        items = list(values)
        return self._add(lambda: column(col).op("<@")(_text_array(items)))

    def pg_any_equal(self, col: str, value: Any) -> "SqlCnd":
        return self._add(lambda: literal(value) == any_(column(col)))

    def pg_not_in_all(self, col: str, value: Any) -> "SqlCnd":
        return self._add(lambda: literal(value) != all_(column(col)))

    def where(self, fragment: str, *args: Any) -> "SqlCnd":
        """`?` 위치 인자를 쓰는 원시 조건 조각을 추가한다.

        리스트/튜플 인자는 `IN (?)`처럼 펼쳐진다. 단, `?::text[]`처럼 바로 뒤에 `::` 캐스트가
        붙으면 펼치지 않고 배열 값 하나로 바인딩한다.
        """

        self._fragment_seq += 1
        prefix = f"w{self._fragment_seq}_"
        pieces = fragment.split("?")
        if len(pieces) - 1 != len(args):
            raise ValueError(
                f"자리표시자 수({len(pieces) - 1})와 인자 수({len(args)})가 일치하지 않습니다: {fragment}"
            )
        sql = pieces[0]
        params = []
        for index, (value, rest) in enumerate(zip(args, pieces[1:])):
            name = f"{prefix}{index}"
            if isinstance(value, (list, tuple, set)):
                value = list(value)
            expanding = isinstance(value, list) and not rest.startswith("::")
            if expanding:
                # 펼침 인자는 괄호를 직접 렌더링하므로 `IN (?)`의 괄호는 제거한다.
                if sql.rstrip().endswith("(") and rest.lstrip().startswith(")"):
                    sql = sql.rstrip()[:-1]
                    rest = rest.lstrip()[1:]
                sql += f":{name}{rest}"
            else:
                # 괄호로 감싸야 뒤따르는 `::` 캐스트가 이름에 붙지 않는다.
                sql += f"(:{name}){rest}"
            params.append(bindparam(name, value, expanding=expanding))
        clause = text(sql).bindparams(*params)
        return self._add(lambda: clause)

    def asc(self, col: str) -> "SqlCnd":
        self._state.orders.append(_OrderBy(col, asc=True))
        return self

    def desc(self, col: str) -> "SqlCnd":
        self._state.orders.append(_OrderBy(col, asc=False))
        return self

    def page(self, page: int, limit: int) -> "SqlCnd":
        self._state.paging = Paging(page=page, limit=limit)
        return self

    def limit(self, limit: int) -> "SqlCnd":
        return self.page(1, limit)

    def build_where(self, statement: Select) -> Select:
        """누적된 조건만 입력 순서대로 적용한다."""

        for predicate in self._state.predicates:
            statement = statement.where(predicate.factory())
        return statement

    def build(self, statement: Select) -> Select:
        """컬럼 선택, 조건, 정렬, 페이징을 모두 적용한 새 `Select`를 반환한다."""

        return self._build(statement, self._state.paging)

    def find(self, session: Session, model: Type[ModelT]) -> list[ModelT]:
        statement = self.build(select(model))
        try:
            return list(session.scalars(statement).all())
        except Exception as exc:
            self._log_failure("find", model, exc)
            raise

    def find_one(self, session: Session, model: Type[ModelT]) -> Optional[ModelT]:
        """첫 번째 행을 반환한다. 누적된 페이징은 바꾸지 않는다."""

        statement = self._build(select(model), Paging(page=1, limit=1))
        try:
            return session.scalars(statement).first()
        except Exception as exc:
            self._log_failure("find_one", model, exc)
            raise

    def count(self, session: Session, model: Type[Any]) -> int:
        statement = self.build_where(select(func.count()).select_from(model))
        try:
            return int(session.scalar(statement) or 0)
        except Exception as exc:
            self._log_failure("count", model, exc)
            raise

    def _build(self, statement: Select, paging: Optional[Paging]) -> Select:
        statement = self._apply_columns(statement)
        statement = self.build_where(statement)
        for order in self._state.orders:
            target = column(order.column)
            statement = statement.order_by(target.asc() if order.asc else target.desc())
        if paging is not None:
            if paging.has_limit:
                statement = statement.limit(paging.limit)
            if paging.has_offset:
                statement = statement.offset(paging.offset)
        return statement

    def _apply_columns(self, statement: Select) -> Select:
        columns = self._state.select_cols
        if not columns:
            return statement
        entity = _selected_entity(statement)
        if entity is not None:
            return statement.options(load_only(*[getattr(entity, name) for name in columns]))
        return statement.with_only_columns(
            *[column(name) for name in columns], maintain_column_froms=True
        )

    def _compare(self, col: str, token: str, value: Any) -> "SqlCnd":
        comparator = _COMPARATORS[token]
        return self._add(lambda: comparator(column(col), value))

    def _add(self, factory: Callable[[], ColumnElement]) -> "SqlCnd":
        self._state.predicates.append(_Predicate(factory))
        return self

    def _log_failure(self, operation: str, model: Any, exc: Exception) -> None:
        self._logger.error(
            f"SQL {operation} 실패: {exc}",
            context=LogContext(
                collection=getattr(model, "__tablename__", None),
                operation=operation,
            ),
            metadata={"error_type": type(exc).__name__},
        )


def _comma_wrapped(col: str) -> ColumnElement:
    return func.concat(",", column(col), ",")


def _text_array(values: list[str]) -> ColumnElement:
    return cast(bindparam(None, values, type_=ARRAY(TEXT)), ARRAY(TEXT))


def _selected_entity(statement: Select) -> Optional[Any]:
    descriptions = statement.column_descriptions
    if len(descriptions) != 1:
        return None
    entity = descriptions[0].get("entity")
    if entity is None or descriptions[0].get("expr") is not entity:
        return None
    return entity
