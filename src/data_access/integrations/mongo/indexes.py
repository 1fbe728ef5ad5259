"""
목적: MongoDB 인덱스 선언 모델과 태그 파서를 제공한다.
설명: 모델이 명시적으로 선언한 인덱스를 pymongo `IndexModel`로 변환하고,
    설정에서 읽어온 `"1,unique"` 형식의 태그를 인덱스 선언으로 해석한다.
디자인 패턴: 값 객체, 파서
참조: src/data_access/integrations/mongo/model.py, src/data_access/integrations/mongo/connection.py
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional, Union

from pydantic import BaseModel
from pymongo import ASCENDING, DESCENDING, GEO2D, GEOSPHERE, HASHED, TEXT, IndexModel

from data_access.shared.exceptions import IndexDeclarationError


class IndexKind(str, Enum):
    """인덱스 종류."""

    ASCENDING = "1"
    DESCENDING = "-1"
    TEXT = "text"
    HASHED = "hashed"
    TTL = "ttl"
    GEO_SPHERE = "2dsphere"
    GEO_2D = "2d"


_KIND_TO_DIRECTION: dict[IndexKind, Union[int, str]] = {
    IndexKind.ASCENDING: ASCENDING,
    IndexKind.DESCENDING: DESCENDING,
    IndexKind.TEXT: TEXT,
    IndexKind.HASHED: HASHED,
    IndexKind.TTL: ASCENDING,
    IndexKind.GEO_SPHERE: GEOSPHERE,
    IndexKind.GEO_2D: GEO2D,
}


class IndexSpec(BaseModel):
    """단일 필드 인덱스 선언.

    Args:
        field: 저장소상의 필드 이름.
        kind: 인덱스 종류.
        unique: 유일 인덱스 여부.
        sparse: 희소 인덱스 여부.
        ttl_seconds: TTL 인덱스 만료 시간(초). `kind`가 TTL일 때 필수.
    """

    field: str
    kind: IndexKind = IndexKind.ASCENDING
    unique: bool = False
    sparse: bool = False
    ttl_seconds: Optional[int] = None

    def model_post_init(self, __context: Any) -> None:
        if not self.field:
            raise IndexDeclarationError("<empty>", "필드 이름이 비어 있습니다.")
        if self.kind is IndexKind.TTL and self.ttl_seconds is None:
            raise IndexDeclarationError(self.field, "ttl 인덱스에는 만료 시간이 필요합니다.")

    @property
    def name(self) -> str:
        """드라이버 기본 규칙(`필드_방향`)과 같은 인덱스 이름. ttl은 `필드_1`이다."""

        return f"{self.field}_{_KIND_TO_DIRECTION[self.kind]}"

    def to_index_model(self) -> IndexModel:
        """pymongo `IndexModel`로 변환한다."""

        options: dict[str, Any] = {}
        if self.unique:
            options["unique"] = True
        if self.sparse:
            options["sparse"] = True
        if self.kind is IndexKind.TTL:
            options["expireAfterSeconds"] = self.ttl_seconds
        return IndexModel([(self.field, _KIND_TO_DIRECTION[self.kind])], **options)


def parse_index_tag(
    field: str,
    tag: str,
    ttl_seconds: Union[int, str, None] = None,
) -> Optional[IndexSpec]:
    """`"1,unique"` 형식의 인덱스 태그를 해석한다.

    알 수 없는 토큰은 무시한다. 태그가 비어 있거나 인덱스 종류 토큰(`1`, `-1`, `text`, `ttl` 등)이
    없으면 인덱스를 만들지 않고 `None`을 반환한다.

    Raises:
        IndexDeclarationError: ttl 토큰에 만료 시간이 없거나 정수가 아닌 경우.
    """

    if not tag or not tag.strip():
        return None

    kind: Optional[IndexKind] = None
    unique = False
    sparse = False
    for raw_token in tag.split(","):
        token = raw_token.strip()
        if token == "unique":
            unique = True
        elif token == "sparse":
            sparse = True
        elif token in IndexKind._value2member_map_:
            kind = IndexKind(token)

    if kind is None:
        return None

    expire: Optional[int] = None
    if kind is IndexKind.TTL:
        if ttl_seconds is None or (isinstance(ttl_seconds, str) and not ttl_seconds.strip()):
            raise IndexDeclarationError(field, "ttl 인덱스에는 ttlSeconds 값이 필요합니다.")
        try:
            expire = int(ttl_seconds)
        except (TypeError, ValueError) as exc:
            raise IndexDeclarationError(
                field, f"ttlSeconds 값이 정수가 아닙니다: {ttl_seconds}"
            ) from exc

    return IndexSpec(field=field, kind=kind, unique=unique, sparse=sparse, ttl_seconds=expire)
