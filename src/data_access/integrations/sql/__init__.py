"""
목적: 관계형 DB 통합 공개 API를 제공한다.
설명: 조건 빌더, 연결 설정/관리자, 원시 SQL 유틸리티를 외부에 노출한다.
디자인 패턴: 퍼사드
참조: src/data_access/integrations/sql/cnd.py, src/data_access/integrations/sql/connection.py
"""

from data_access.integrations.sql.cnd import SqlCnd
from data_access.integrations.sql.config import SqlConfig
from data_access.integrations.sql.connection import SqlConnectionManager
from data_access.integrations.sql.utils import keyword_wrap, null_if_blank

__all__ = ["SqlCnd", "SqlConfig", "SqlConnectionManager", "keyword_wrap", "null_if_blank"]
