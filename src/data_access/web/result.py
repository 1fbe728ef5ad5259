"""
목적: 페이지/커서 결과 페이로드 모델을 제공한다.
설명: 응답 봉투의 `data`에 들어가는 목록 결과 형식을 정의한다.
디자인 패턴: 데이터 전송 객체(DTO)
참조: src/data_access/web/json_result.py
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class PageResult(BaseModel):
    """전체 건수를 포함한 페이지 결과."""

    total: int = 0
    results: Any = None


class CursorResult(BaseModel):
    """다음 페이지 커서를 포함한 결과."""

    model_config = ConfigDict(populate_by_name=True)

    results: Any = None
    cursor: str = ""
    has_more: bool = Field(default=False, alias="hasMore")
