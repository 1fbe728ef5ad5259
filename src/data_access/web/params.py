"""
목적: 요청 파라미터 추출 헬퍼를 제공한다.
설명: 쿼리스트링과 폼 값을 합친 뒤 타입 변환, 기본값 대체, 쉼표 구분 목록, 날짜 파싱, 페이징 파라미터를 지원한다.
    같은 이름이 쿼리스트링과 폼에 모두 있으면 폼 값을 쓴다.
디자인 패턴: 어댑터 패턴
참조: src/data_access/shared/const/__init__.py, src/data_access/shared/exceptions/errors.py
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Mapping, Optional, Type, TypeVar

from fastapi import Request
from pydantic import BaseModel

from data_access.integrations.paging import Paging
from data_access.shared.const import SharedConst
from data_access.shared.exceptions import ParamError

ModelT = TypeVar("ModelT", bound=BaseModel)

_TRUE_VALUES = {"1", "t", "T", "TRUE", "true", "True"}
_FALSE_VALUES = {"0", "f", "F", "FALSE", "false", "False"}


def parse_bool(raw: str) -> bool:
    """`1 t T TRUE true True` / `0 f F FALSE false False`만 허용한다."""

    if raw in _TRUE_VALUES:
        return True
    if raw in _FALSE_VALUES:
        return False
    raise ValueError(f"bool 값으로 해석할 수 없습니다: {raw!r}")


def parse_date(raw: Optional[str]) -> Optional[datetime]:
    """허용된 날짜 형식을 순서대로 시도한다. 모두 실패하면 `None`."""

    if raw is None or not raw.strip():
        return None
    for layout in SharedConst.DATE_LAYOUTS:
        try:
            return datetime.strptime(raw, layout).astimezone()
        except ValueError:
            continue
    return None


class RequestParams:
    """요청 파라미터 조회기.

    Args:
        values: 파라미터 이름과 문자열 값의 매핑.
    """

    def __init__(self, values: Optional[Mapping[str, str]] = None) -> None:
        self._values: dict[str, str] = dict(values or {})

    @classmethod
    async def from_request(cls, request: Request) -> "RequestParams":
        """쿼리스트링과 폼 값을 합쳐 생성한다. 이름이 반복되면 첫 번째 값을 쓴다."""

        values: dict[str, str] = {}
        for key, value in request.query_params.multi_items():
            values.setdefault(key, value)
        form = await request.form()
        form_values: dict[str, str] = {}
        for key, value in form.multi_items():
            if isinstance(value, str):
                form_values.setdefault(key, value)
        values.update(form_values)
        return cls(values)

    @property
    def values(self) -> dict[str, str]:
        return dict(self._values)

    def get(self, name: str) -> tuple[str, bool]:
        value = self._values.get(name, "")
        return value, value != ""

    def get_int(self, name: str) -> tuple[int, bool]:
        raw, ok = self.get(name)
        if not ok:
            return 0, False
        try:
            return int(raw.strip()), True
        except ValueError:
            return 0, False

    def get_bool(self, name: str) -> tuple[bool, bool]:
        raw, ok = self.get(name)
        if not ok:
            return False, False
        try:
            return parse_bool(raw), True
        except ValueError:
            return False, False

    def get_float(self, name: str) -> tuple[float, bool]:
        raw, ok = self.get(name)
        if not ok:
            return 0.0, False
        try:
            return float(raw.strip()), True
        except ValueError:
            return 0.0, False

    def get_time(self, name: str) -> Optional[datetime]:
        return parse_date(self._values.get(name))

    def get_int_list(self, name: str) -> Optional[list[int]]:
        """쉼표로 구분된 정수 목록. 해석할 수 없는 항목은 건너뛴다."""

        raw, ok = self.get(name)
        if not ok:
            return None
        result: list[int] = []
        for item in raw.split(","):
            try:
                result.append(int(item.strip()))
            except ValueError:
                continue
        return result

    def form_value(self, name: str) -> str:
        return self._values.get(name, "")

    def form_value_required(self, name: str) -> str:
        value = self.form_value(name)
        if not value:
            raise ParamError(name)
        return value

    def form_value_default(self, name: str, default: str) -> str:
        return self.form_value(name) or default

    def form_value_int(self, name: str) -> int:
        """값이 없으면 `ParamError`, 정수가 아니면 `ValueError`를 발생시킨다."""

        raw = self.form_value(name)
        if raw == "":
            raise ParamError(name)
        return int(raw)

    def form_value_int_default(self, name: str, default: int) -> int:
        try:
            return self.form_value_int(name)
        except (ParamError, ValueError):
            return default

    def form_value_int_list(self, name: str) -> Optional[list[int]]:
        raw = self.form_value(name)
        if raw == "":
            return None
        result: list[int] = []
        for item in raw.split(","):
            try:
                result.append(int(item))
            except ValueError:
                continue
        return result

    def form_value_string_list(self, name: str) -> Optional[list[str]]:
        raw = self.form_value(name)
        if raw == "":
            return None
        return [item.strip() for item in raw.split(",") if item.strip()]

    def form_value_bool(self, name: str) -> bool:
        raw = self.form_value(name)
        if raw == "":
            raise ParamError(name)
        return parse_bool(raw)

    def form_value_bool_default(self, name: str, default: bool) -> bool:
        raw = self.form_value(name)
        if raw == "":
            return default
        try:
            return parse_bool(raw)
        except ValueError:
            return default

    def form_date(self, name: str) -> Optional[datetime]:
        return parse_date(self.form_value(name))

    def get_paging(self) -> Paging:
        """`page`/`limit` 파라미터. 없거나 0 이하이면 1 / 20을 쓴다."""

        page = self.form_value_int_default("page", SharedConst.DEFAULT_PAGE)
        limit = self.form_value_int_default("limit", SharedConst.DEFAULT_PAGE_LIMIT)
        if page <= 0:
            page = SharedConst.DEFAULT_PAGE
        if limit <= 0:
            limit = SharedConst.DEFAULT_PAGE_LIMIT
        return Paging(page=page, limit=limit)

    def read_form(self, model_cls: Type[ModelT]) -> Optional[ModelT]:
        """파라미터를 Pydantic 모델로 변환한다. 값이 하나도 없으면 `None`.

        빈 문자열 값은 누락된 것으로 보고 모델 기본값을 쓴다.
        """

        if not self._values:
            return None
        payload: dict[str, Any] = {key: value for key, value in self._values.items() if value != ""}
        return model_cls.model_validate(payload)


async def request_params(request: Request) -> RequestParams:
    """FastAPI 의존성: `Depends(request_params)`."""

    return await RequestParams.from_request(request)
