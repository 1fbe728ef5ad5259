"""
목적: 공통 상수 집합을 제공한다.
설명: 설정 로딩, 요청 파라미터 파싱, 페이지네이션에서 사용하는 기본 상수 값을 정의한다.
디자인 패턴: 상수 객체
참조: src/data_access/shared/config/loader.py, src/data_access/web/params.py
"""


class SharedConst:
    """공통 상수 집합이다.

    Attributes:
        DEFAULT_ENCODING: 기본 파일 인코딩.
        ENV_NESTED_DELIMITER: 환경 변수 키를 중첩 경로로 해석하는 구분자.
        FMT_DATE_TIME: 초 단위까지 포함한 날짜/시간 포맷.
        FMT_DATE: 날짜 포맷.
        FMT_DATE_TIME_NO_SECONDS: 분 단위까지 포함한 날짜/시간 포맷.
        DATE_LAYOUTS: 요청 파라미터 날짜 파싱 시 순서대로 시도하는 포맷 목록.
        DEFAULT_PAGE: 페이지 파라미터 기본값.
        DEFAULT_PAGE_LIMIT: 페이지 크기 파라미터 기본값.
    """

    DEFAULT_ENCODING = "utf-8"
    ENV_NESTED_DELIMITER = "__"

    FMT_DATE_TIME = "%Y-%m-%d %H:%M:%S"
    FMT_DATE = "%Y-%m-%d"
    FMT_DATE_TIME_NO_SECONDS = "%Y-%m-%d %H:%M"
    DATE_LAYOUTS = (FMT_DATE_TIME, FMT_DATE, FMT_DATE_TIME_NO_SECONDS)

    DEFAULT_PAGE = 1
    DEFAULT_PAGE_LIMIT = 20


__all__ = ["SharedConst"]
