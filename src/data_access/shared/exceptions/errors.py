"""
목적: 라이브러리에서 직접 발생시키는 예외 타입을 정의한다.
설명: 응답 코드 예외, 요청 파라미터 예외, 모델/인덱스 선언 예외를 제공한다.
디자인 패턴: 도메인 예외 객체
참조: src/data_access/shared/exceptions/base.py, src/data_access/web/json_result.py
"""

from __future__ import annotations

from typing import Any, Optional

from data_access.shared.exceptions.base import BaseAppException
from data_access.shared.exceptions.models import ErrorCode, ExceptionDetail


class CodeError(BaseAppException):
    """숫자 응답 코드와 페이로드를 함께 전달하는 예외이다.

    `json_error`는 이 예외를 만나면 code/msg/data를 그대로 응답 봉투에 옮긴다.

    Args:
        code: 응답 봉투에 기록할 숫자 코드.
        message: 응답 메시지.
        data: 함께 전달할 페이로드.
    """

    def __init__(self, code: int, message: str, data: Any = None) -> None:
        super().__init__(
            message,
            ExceptionDetail(code=ErrorCode.CODE_ERROR, metadata={"code": code}),
        )
        self.code = code
        self.data = data

    @property
    def msg(self) -> str:
        return self.message


class ParamError(BaseAppException):
    """요청 파라미터가 없거나 해석할 수 없을 때 발생한다."""

    def __init__(self, name: str, message: Optional[str] = None) -> None:
        super().__init__(
            message or f"unable to find param value '{name}'",
            ExceptionDetail(code=ErrorCode.PARAM_MISSING, metadata={"name": name}),
        )
        self.name = name


class IndexDeclarationError(BaseAppException):
    """인덱스 선언이 잘못되었을 때 발생한다. 기동 단계에서 치명적으로 취급한다."""

    def __init__(self, field: str, cause: str) -> None:
        super().__init__(
            f"잘못된 인덱스 선언입니다: {field} ({cause})",
            ExceptionDetail(
                code=ErrorCode.INDEX_DECLARATION_INVALID,
                cause=cause,
                metadata={"field": field},
            ),
        )
        self.field = field


class ModelDeclarationError(BaseAppException):
    """모델 메타데이터(컬렉션 이름 등)가 선언되지 않았을 때 발생한다."""

    def __init__(self, model_name: str, cause: str) -> None:
        super().__init__(
            f"모델 선언이 올바르지 않습니다: {model_name} ({cause})",
            ExceptionDetail(
                code=ErrorCode.MODEL_DECLARATION_INVALID,
                cause=cause,
                hint="모델 클래스에 __collection__ 을 선언하세요.",
                metadata={"model": model_name},
            ),
        )
        self.model_name = model_name
