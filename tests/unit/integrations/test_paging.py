"""
목적: 페이지네이션 값 객체를 검증한다.
설명: 오프셋 계산과 0 이하 값의 비활성화 규칙을 확인한다.
디자인 패턴: 테스트 케이스
참조: src/data_access/integrations/paging.py
"""

from __future__ import annotations

import pytest

from data_access.integrations import Paging


@pytest.mark.parametrize(
    ("page", "limit", "offset"),
    [(1, 20, 0), (2, 20, 20), (5, 7, 28), (0, 20, 0), (3, 0, 0), (-1, 10, 0)],
)
def test_offset(page: int, limit: int, offset: int) -> None:
    """`(page - 1) * limit` 오프셋 계산을 확인한다."""

    assert Paging(page=page, limit=limit).offset == offset


def test_flags() -> None:
    """limit/offset 적용 여부 플래그를 확인한다."""

    first = Paging(page=1, limit=10)
    second = Paging(page=2, limit=10)

    assert first.has_limit is True
    assert first.has_offset is False
    assert second.has_offset is True
    assert Paging().has_limit is False
