"""
목적: 공통 모듈 패키지를 정의한다.
설명: 로깅, 예외, 설정, 상수 모듈을 묶는다.
디자인 패턴: 패키지 모듈
참조: src/data_access/shared/logging, src/data_access/shared/exceptions, src/data_access/shared/config
"""
