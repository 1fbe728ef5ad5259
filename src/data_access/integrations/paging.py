"""
목적: 조건 빌더가 공유하는 페이지네이션 모델을 제공한다.
설명: 페이지 번호와 페이지 크기로부터 0 기반 오프셋을 계산한다.
디자인 패턴: 값 객체
참조: src/data_access/integrations/mongo/cnd.py, src/data_access/integrations/sql/cnd.py
"""

from __future__ import annotations

from pydantic import BaseModel


class Paging(BaseModel):
    """페이지네이션 정보.

    0 이하의 값은 해당 절을 비활성화한다. 검증은 하지 않는다.
    """

    page: int = 0
    limit: int = 0

    @property
    def offset(self) -> int:
        """건너뛸 레코드 수를 반환한다."""

        if self.page > 0 and self.limit > 0:
            return (self.page - 1) * self.limit
        return 0

    @property
    def has_limit(self) -> bool:
        return self.limit > 0

    @property
    def has_offset(self) -> bool:
        return self.offset > 0
