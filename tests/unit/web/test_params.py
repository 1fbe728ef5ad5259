"""
목적: 요청 파라미터 헬퍼를 검증한다.
설명: FastAPI 의존성으로 쿼리스트링/폼 값을 합치는 동작과 타입 변환, 기본값, 날짜, 페이징, 모델 바인딩을 확인한다.
디자인 패턴: 테스트 케이스
참조: src/data_access/web/params.py
"""

from __future__ import annotations

from typing import Optional

import pytest
from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient
from pydantic import BaseModel

from data_access.shared.exceptions import ParamError
from data_access.web import RequestParams, parse_bool, parse_date, request_params


class SearchForm(BaseModel):
    keyword: str = ""
    size: int = 10
    active: Optional[bool] = None


def _client() -> TestClient:
    app = FastAPI()

    @app.api_route("/echo", methods=["GET", "POST"])
    async def echo(params: RequestParams = Depends(request_params)) -> dict:
        return params.values

    return TestClient(app)


def test_query_values_are_collected() -> None:
    """쿼리스트링 값이 수집되고 반복 이름은 첫 번째 값을 쓰는지 확인한다."""

    response = _client().get("/echo", params=[("name", "kim"), ("name", "lee"), ("age", "3")])

    assert response.status_code == 200
    assert response.json() == {"name": "kim", "age": "3"}


def test_form_values_take_precedence_over_query() -> None:
    """같은 이름이 있으면 폼 값이 쿼리스트링 값을 덮어쓰는지 확인한다."""

    response = _client().post("/echo?name=query&page=2", data={"name": "form", "limit": "5"})

    assert response.json() == {"name": "form", "page": "2", "limit": "5"}


def test_typed_getters() -> None:
    """`(값, 성공 여부)` 형태의 조회 결과를 확인한다."""

    params = RequestParams({"n": " 42 ", "f": "1.5", "b": "T", "bad": "x", "ids": "1, 2,x,3"})

    assert params.get("n") == (" 42 ", True)
    assert params.get("missing") == ("", False)
    assert params.get_int("n") == (42, True)
    assert params.get_int("bad") == (0, False)
    assert params.get_float("f") == (1.5, True)
    assert params.get_bool("b") == (True, True)
    assert params.get_bool("bad") == (False, False)
    assert params.get_int_list("ids") == [1, 2, 3]
    assert params.get_int_list("missing") is None


def test_form_value_helpers() -> None:
    """필수/기본값/목록 헬퍼를 확인한다."""

    params = RequestParams({"name": "kim", "age": "30", "tags": "a, b,,c", "flag": "false"})

    assert params.form_value("missing") == ""
    assert params.form_value_required("name") == "kim"
    assert params.form_value_default("missing", "guest") == "guest"
    assert params.form_value_int("age") == 30
    assert params.form_value_int_default("name", 7) == 7
    assert params.form_value_int_list("age") == [30]
    assert params.form_value_string_list("tags") == ["a", "b", "c"]
    assert params.form_value_string_list("missing") is None
    assert params.form_value_bool("flag") is False
    assert params.form_value_bool_default("missing", True) is True


def test_missing_required_values_raise_param_error() -> None:
    """필수 값이 없으면 이름을 담은 `ParamError`가 발생하는지 확인한다."""

    params = RequestParams({"age": "abc"})

    with pytest.raises(ParamError) as raised:
        params.form_value_required("name")
    assert raised.value.name == "name"
    with pytest.raises(ParamError):
        params.form_value_int("missing")
    with pytest.raises(ValueError):
        params.form_value_int("age")


@pytest.mark.parametrize("raw", ["1", "t", "T", "TRUE", "true", "True"])
def test_parse_bool_true_tokens(raw: str) -> None:
    """참으로 해석되는 토큰을 확인한다."""

    assert parse_bool(raw) is True


@pytest.mark.parametrize("raw", ["yes", "on", "tRuE", ""])
def test_parse_bool_rejects_other_tokens(raw: str) -> None:
    """허용 목록 밖의 값은 거부하는지 확인한다."""

    with pytest.raises(ValueError):
        parse_bool(raw)


def test_parse_date_layouts() -> None:
    """허용된 날짜 형식과 로컬 시간대 적용을 확인한다."""

    full = parse_date("2024-03-01 10:20:30")
    day = parse_date("2024-03-01")
    minutes = parse_date("2024-03-01 10:20")

    assert full is not None and (full.hour, full.minute, full.second) == (10, 20, 30)
    assert full.tzinfo is not None
    assert day is not None and (day.year, day.month, day.day) == (2024, 3, 1)
    assert minutes is not None and minutes.minute == 20
    assert parse_date("01/03/2024") is None
    assert parse_date("") is None
    assert RequestParams({"at": "2024-03-01"}).form_date("at") == day


@pytest.mark.parametrize(
    ("values", "expected"),
    [
        ({}, (1, 20)),
        ({"page": "3", "limit": "50"}, (3, 50)),
        ({"page": "0", "limit": "-5"}, (1, 20)),
        ({"page": "x", "limit": "10"}, (1, 10)),
    ],
)
def test_get_paging_defaults(values: dict, expected: tuple) -> None:
    """페이징 파라미터 기본값과 0 이하 값 대체를 확인한다."""

    paging = RequestParams(values).get_paging()

    assert (paging.page, paging.limit) == expected


def test_read_form_binds_model() -> None:
    """파라미터가 모델로 변환되고 빈 문자열은 기본값을 쓰는지 확인한다."""

    form = RequestParams({"keyword": "mongo", "size": "", "active": "true"}).read_form(SearchForm)

    assert form == SearchForm(keyword="mongo", size=10, active=True)
    assert RequestParams({}).read_form(SearchForm) is None
