"""
목적: MongoDB 통합 공개 API를 제공한다.
설명: 조건 빌더, 모델/훅, 컬렉션 래퍼, 인덱스 선언, 연결 관리자를 외부에 노출한다.
디자인 패턴: 퍼사드
참조: src/data_access/integrations/mongo/cnd.py, src/data_access/integrations/mongo/connection.py
"""

from data_access.integrations.mongo.builder import (
    Count,
    Group,
    Limit,
    Lookup,
    Match,
    Operator,
    Project,
    Skip,
    Sort,
    Unwind,
    append_not_none,
    to_pipeline,
    to_stage,
)
from data_access.integrations.mongo.cnd import MongoCnd
from data_access.integrations.mongo.collection import Collection
from data_access.integrations.mongo.config import MongoConfig, MongoTLSConfig
from data_access.integrations.mongo.connection import (
    CommandLogListener,
    MongoConnectionManager,
    init_mongo,
)
from data_access.integrations.mongo.hooks import (
    CreatedHook,
    CreatingHook,
    DeletedHook,
    DeletingHook,
    SavedHook,
    SavingHook,
    UpdatedHook,
    UpdatingHook,
)
from data_access.integrations.mongo.indexes import IndexKind, IndexSpec, parse_index_tag
from data_access.integrations.mongo.model import (
    DateFields,
    DefaultModel,
    DefaultTenantModel,
    IDField,
    Model,
    TenantIdField,
)

__all__ = [
    "MongoCnd",
    "Collection",
    "MongoConfig",
    "MongoTLSConfig",
    "MongoConnectionManager",
    "CommandLogListener",
    "init_mongo",
    "Model",
    "IDField",
    "DateFields",
    "TenantIdField",
    "DefaultModel",
    "DefaultTenantModel",
    "CreatingHook",
    "CreatedHook",
    "SavingHook",
    "SavedHook",
    "UpdatingHook",
    "UpdatedHook",
    "DeletingHook",
    "DeletedHook",
    "IndexKind",
    "IndexSpec",
    "parse_index_tag",
    "Operator",
    "Match",
    "Sort",
    "Limit",
    "Skip",
    "Project",
    "Group",
    "Lookup",
    "Unwind",
    "Count",
    "to_stage",
    "to_pipeline",
    "append_not_none",
]
