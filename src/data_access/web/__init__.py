"""
목적: 웹 응답/요청 헬퍼 공개 API를 제공한다.
설명: JSON 응답 봉투, 페이지/커서 결과, 요청 파라미터 조회기를 외부에 노출한다.
디자인 패턴: 퍼사드
참조: src/data_access/web/json_result.py, src/data_access/web/params.py
"""

from data_access.web.json_result import (
    JsonResult,
    RspBuilder,
    convert_list,
    json_cursor_data,
    json_data,
    json_error,
    json_error_code,
    json_error_data,
    json_error_msg,
    json_item_list,
    json_page_data,
    json_result,
    json_success,
)
from data_access.web.params import RequestParams, parse_bool, parse_date, request_params
from data_access.web.result import CursorResult, PageResult

__all__ = [
    "JsonResult",
    "PageResult",
    "CursorResult",
    "RspBuilder",
    "convert_list",
    "json_result",
    "json_data",
    "json_item_list",
    "json_page_data",
    "json_cursor_data",
    "json_success",
    "json_error",
    "json_error_msg",
    "json_error_code",
    "json_error_data",
    "RequestParams",
    "request_params",
    "parse_bool",
    "parse_date",
]
