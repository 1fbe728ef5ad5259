"""
목적: 원시 SQL 조각 작성을 돕는 유틸리티를 제공한다.
설명: 식별자 인용과 빈 문자열의 NULL 변환을 담당한다.
디자인 패턴: 유틸리티 함수
참조: src/data_access/integrations/sql/cnd.py
"""

from __future__ import annotations

from typing import Optional

from sqlalchemy.engine import Dialect


def keyword_wrap(keyword: str, dialect: Optional[Dialect] = None) -> str:
    """식별자를 인용한다.

    방언이 주어지면 해당 방언의 인용 규칙을 따르고, 아니면 백틱으로 감싼다.
    공백뿐인 이름은 그대로 반환한다.
    """

    if not keyword or not keyword.strip():
        return keyword
    if dialect is not None:
        return dialect.identifier_preparer.quote_identifier(keyword)
    return f"`{keyword}`"


def null_if_blank(value: Optional[str]) -> Optional[str]:
    """빈 문자열을 `None`으로 바꾼다. 널 허용 컬럼에 바인딩할 때 쓴다."""

    if not value:
        return None
    return value
