"""
목적: 공통 예외 모델과 라이브러리 예외 동작을 검증한다.
설명: 베이스 예외 직렬화, 응답 코드 예외, 파라미터/선언 예외의 메시지와 상세 정보를 확인한다.
디자인 패턴: 도메인 예외 객체, DTO
참조: src/data_access/shared/exceptions/base.py, src/data_access/shared/exceptions/errors.py
"""

from __future__ import annotations

from data_access.shared.exceptions import (
    BaseAppException,
    CodeError,
    ErrorCode,
    ExceptionDetail,
    IndexDeclarationError,
    ModelDeclarationError,
    ParamError,
)


def test_base_app_exception_to_dict() -> None:
    """BaseAppException의 직렬화 결과를 검증한다."""

    detail = ExceptionDetail(
        code="E-001",
        cause="입력 데이터 누락",
        hint="필수 파라미터를 확인하세요.",
        metadata={"field": "name"},
    )
    original = ValueError("name is required")
    error = BaseAppException(message="유효하지 않은 요청입니다.", detail=detail, original=original)

    result = error.to_dict()

    assert error.message == "유효하지 않은 요청입니다."
    assert error.detail.code == "E-001"
    assert error.original is original
    assert result["message"] == "유효하지 않은 요청입니다."
    assert result["detail"]["metadata"]["field"] == "name"
    assert "ValueError" in result["original"]


def test_code_error_keeps_code_and_payload() -> None:
    """CodeError가 코드/메시지/데이터를 보관하는지 확인한다."""

    error = CodeError(1001, "권한이 없습니다.", data={"role": "guest"})

    assert error.code == 1001
    assert error.msg == "권한이 없습니다."
    assert error.data == {"role": "guest"}
    assert error.detail.metadata["code"] == 1001
    assert str(error) == "권한이 없습니다."


def test_param_error_default_message() -> None:
    """ParamError 기본 메시지를 확인한다."""

    error = ParamError("page")

    assert error.message == "unable to find param value 'page'"
    assert error.name == "page"
    assert error.detail.code == ErrorCode.PARAM_MISSING


def test_declaration_errors_carry_metadata() -> None:
    """선언 예외가 대상 이름을 메타데이터로 남기는지 확인한다."""

    index_error = IndexDeclarationError("expires_at", "ttl 누락")
    model_error = ModelDeclarationError("User", "__collection__ 누락")

    assert index_error.field == "expires_at"
    assert index_error.detail.metadata["field"] == "expires_at"
    assert model_error.model_name == "User"
    assert model_error.detail.hint is not None
    assert index_error.detail.code == ErrorCode.INDEX_DECLARATION_INVALID
    assert model_error.detail.code == ErrorCode.MODEL_DECLARATION_INVALID
    assert CodeError(1, "x").detail.code == ErrorCode.CODE_ERROR
