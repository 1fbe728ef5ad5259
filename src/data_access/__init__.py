"""
목적: data_access 패키지를 정의한다.
설명: MongoDB/SQLAlchemy 조건 빌더, 모델 생명주기 훅, 연결 부트스트랩, 웹 응답/요청 헬퍼를 묶는다.
디자인 패턴: 패키지 모듈
참조: src/data_access/integrations, src/data_access/web, src/data_access/shared
"""

__version__ = "0.1.0"
