"""
목적: 예외 모듈 공개 API를 제공한다.
설명: 외부에서 사용할 예외 모델과 베이스/도메인 예외 클래스를 노출한다.
디자인 패턴: 퍼사드
참조: src/data_access/shared/exceptions/models.py, src/data_access/shared/exceptions/base.py
"""

from data_access.shared.exceptions.base import BaseAppException
from data_access.shared.exceptions.errors import (
    CodeError,
    IndexDeclarationError,
    ModelDeclarationError,
    ParamError,
)
from data_access.shared.exceptions.models import ErrorCode, ExceptionDetail

__all__ = [
    "BaseAppException",
    "ExceptionDetail",
    "ErrorCode",
    "CodeError",
    "ParamError",
    "IndexDeclarationError",
    "ModelDeclarationError",
]
