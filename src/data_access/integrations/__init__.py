"""
목적: 외부 저장소 통합 패키지를 정의한다.
설명: MongoDB와 관계형 DB 통합, 공용 페이징 모델을 묶는다.
디자인 패턴: 패키지 모듈
참조: src/data_access/integrations/mongo, src/data_access/integrations/sql
"""

from data_access.integrations.paging import Paging

__all__ = ["Paging"]
