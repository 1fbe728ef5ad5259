"""
목적: 공통 JSON 응답 봉투와 생성 헬퍼를 제공한다.
설명: `{code, msg, data, success}` 형식의 성공/실패 응답을 만들고 FastAPI 응답으로 변환한다.
디자인 패턴: 팩토리 함수, 빌더 패턴
참조: src/data_access/web/result.py, src/data_access/shared/exceptions/errors.py
"""

from __future__ import annotations

import dataclasses
from typing import Any, Callable, Iterable, Mapping, Optional, Sequence, TypeVar

from fastapi.responses import JSONResponse
from pydantic import BaseModel

from data_access.shared.exceptions import CodeError
from data_access.web.result import CursorResult, PageResult

T = TypeVar("T")


class JsonResult(BaseModel):
    """공통 응답 봉투."""

    code: int = 0
    msg: str = ""
    data: Any = None
    success: bool = False

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)

    def to_response(self, status_code: int = 200) -> JSONResponse:
        """FastAPI `JSONResponse`로 변환한다."""

        return JSONResponse(content=self.to_payload(), status_code=status_code)


def json_result(code: int, message: str, data: Any, success: bool) -> JsonResult:
    return JsonResult(code=code, msg=message, data=data, success=success)


def json_data(data: Any) -> JsonResult:
    return JsonResult(code=0, data=data, success=True)


def json_item_list(items: Sequence[Any]) -> JsonResult:
    return JsonResult(code=0, data=list(items), success=True)


def json_page_data(results: Any, total: int) -> JsonResult:
    return json_data(PageResult(total=total, results=results))


def json_cursor_data(results: Any, cursor: str, has_more: bool) -> JsonResult:
    return json_data(CursorResult(results=results, cursor=cursor, has_more=has_more))


def json_success() -> JsonResult:
    return JsonResult(code=0, data=None, success=True)


def json_error(error: BaseException) -> JsonResult:
    """예외를 실패 응답으로 변환한다.

    `CodeError`는 자신의 code/msg/data를 그대로 쓰고, 그 밖의 예외는 code 0과 예외 메시지를 쓴다.
    """

    if isinstance(error, CodeError):
        return JsonResult(code=error.code, msg=error.msg, data=error.data, success=False)
    return JsonResult(code=0, msg=str(error), data=None, success=False)


def json_error_msg(message: str) -> JsonResult:
    return JsonResult(code=0, msg=message, data=None, success=False)


def json_error_code(code: int, message: str) -> JsonResult:
    return JsonResult(code=code, msg=message, data=None, success=False)


def json_error_data(code: int, message: str, data: Any) -> JsonResult:
    return JsonResult(code=code, msg=message, data=data, success=False)


class RspBuilder:
    """응답 데이터 사전을 단계적으로 구성한다.

    Args:
        obj: 초기 데이터. 매핑, Pydantic 모델, 데이터클래스를 받는다.
        excludes: 초기 데이터에서 제외할 키.
    """

    def __init__(self, obj: Any = None, excludes: Iterable[str] = ()) -> None:
        self._data: dict[str, Any] = _to_mapping(obj, set(excludes))

    @classmethod
    def empty(cls) -> "RspBuilder":
        return cls()

    def put(self, key: str, value: Any) -> "RspBuilder":
        self._data[key] = value
        return self

    def build(self) -> dict[str, Any]:
        return self._data

    def json_result(self) -> JsonResult:
        return json_data(self._data)


def convert_list(
    results: Iterable[T],
    conv: Callable[[T], Optional[Mapping[str, Any]]],
) -> list[Mapping[str, Any]]:
    """변환 결과가 `None`인 항목은 건너뛴다."""

    converted: list[Mapping[str, Any]] = []
    for item in results:
        value = conv(item)
        if value is not None:
            converted.append(value)
    return converted


def _to_mapping(obj: Any, excludes: set[str]) -> dict[str, Any]:
    if obj is None:
        return {}
    if isinstance(obj, BaseModel):
        data = obj.model_dump(by_alias=True)
    elif dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        data = dataclasses.asdict(obj)
    elif isinstance(obj, Mapping):
        data = dict(obj)
    else:
        raise TypeError(f"응답 데이터로 변환할 수 없는 타입입니다: {type(obj).__name__}")
    return {key: value for key, value in data.items() if key not in excludes}
