"""
목적: 집계 스테이지 빌더를 검증한다.
설명: 스테이지 객체의 사전 변환, 선택 항목 생략, 원시 스테이지와의 혼합을 확인한다.
디자인 패턴: 테스트 케이스
참조: src/data_access/integrations/mongo/builder.py
"""

from __future__ import annotations

from data_access.integrations.mongo import (
    Count,
    Group,
    Lookup,
    Match,
    Project,
    Skip,
    Sort,
    Unwind,
    append_not_none,
    to_pipeline,
    to_stage,
)


def test_basic_stages() -> None:
    """기본 스테이지가 `{연산자: 본문}` 형태로 변환되는지 확인한다."""

    assert to_stage(Match({"status": "ACTIVE"})) == {"$match": {"status": "ACTIVE"}}
    assert to_stage(Sort(("created_at", -1), ("name", 1))) == {
        "$sort": {"created_at": -1, "name": 1}
    }
    assert to_stage(Skip(20)) == {"$skip": 20}
    assert to_stage(Project({"name": 1, "_id": 0})) == {"$project": {"name": 1, "_id": 0}}
    assert to_stage(Count("total")) == {"$count": "total"}


def test_group_merges_accumulators() -> None:
    """그룹 키와 누산기가 한 본문으로 합쳐지는지 확인한다."""

    stage = to_stage(Group("$status", {"total": {"$sum": 1}}))

    assert stage == {"$group": {"_id": "$status", "total": {"$sum": 1}}}


def test_lookup_omits_unset_fields() -> None:
    """지정하지 않은 lookup 항목은 생략되는지 확인한다."""

    simple = to_stage(Lookup("orders", "orders", local_field="_id", foreign_field="user_id"))
    with_pipeline = to_stage(
        Lookup("orders", "recent", let={"uid": "$_id"}, pipeline=[{"$limit": 3}])
    )

    assert simple == {
        "$lookup": {
            "from": "orders",
            "localField": "_id",
            "foreignField": "user_id",
            "as": "orders",
        }
    }
    assert with_pipeline["$lookup"] == {
        "from": "orders",
        "let": {"uid": "$_id"},
        "pipeline": [{"$limit": 3}],
        "as": "recent",
    }


def test_unwind_short_and_long_form() -> None:
    """옵션이 없으면 경로 문자열만, 있으면 문서 형태로 변환되는지 확인한다."""

    assert to_stage(Unwind("$tags")) == {"$unwind": "$tags"}
    assert to_stage(Unwind("$tags", preserve_null_and_empty_arrays=True)) == {
        "$unwind": {"path": "$tags", "preserveNullAndEmptyArrays": True}
    }


def test_to_pipeline_mixes_builders_and_raw_stages() -> None:
    """빌더와 원시 사전이 입력 순서대로 파이프라인이 되는지 확인한다."""

    raw = {"$addFields": {"score": {"$add": ["$a", "$b"]}}}

    assert to_pipeline([Match({"a": 1}), raw, Skip(5)]) == [
        {"$match": {"a": 1}},
        raw,
        {"$skip": 5},
    ]


def test_append_not_none() -> None:
    """`None` 값은 추가하지 않는지 확인한다."""

    target: dict = {}
    append_not_none(target, "a", None)
    append_not_none(target, "b", False)

    assert target == {"b": False}
