"""
목적: 모델 생명주기 훅 인터페이스와 디스패처를 제공한다.
설명: 훅은 선택 기능이다. 모델이 해당 믹스인을 구현한 경우에만 호출되고, 아니면 아무 동작도 하지 않는다.
디자인 패턴: 템플릿 메서드, 선택적 인터페이스
참조: src/data_access/integrations/mongo/operations.py, src/data_access/integrations/mongo/model.py
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class CreatingHook(ABC):
    @abstractmethod
    def creating(self) -> None:
        """삽입 전에 호출된다."""


class CreatedHook(ABC):
    @abstractmethod
    def created(self) -> None:
        """삽입 후에 호출된다."""


class UpdatingHook(ABC):
    @abstractmethod
    def updating(self) -> None:
        """업데이트/패치 전에 호출된다."""


class UpdatedHook(ABC):
    @abstractmethod
    def updated(self, result: Any) -> None:
        """업데이트/패치 후 `UpdateResult`와 함께 호출된다."""


class SavingHook(ABC):
    @abstractmethod
    def saving(self) -> None:
        """생성과 업데이트 전에 공통으로 호출된다."""


class SavedHook(ABC):
    @abstractmethod
    def saved(self) -> None:
        """생성과 업데이트 후에 공통으로 호출된다."""


class DeletingHook(ABC):
    @abstractmethod
    def deleting(self) -> None:
        """삭제 전에 호출된다."""


class DeletedHook(ABC):
    @abstractmethod
    def deleted(self, result: Any) -> None:
        """삭제 후 `DeleteResult`와 함께 호출된다."""


def before_create_hooks(model: object) -> None:
    if isinstance(model, CreatingHook):
        model.creating()
    if isinstance(model, SavingHook):
        model.saving()


def after_create_hooks(model: object) -> None:
    if isinstance(model, CreatedHook):
        model.created()
    if isinstance(model, SavedHook):
        model.saved()


def before_update_hooks(model: object) -> None:
    if isinstance(model, UpdatingHook):
        model.updating()
    if isinstance(model, SavingHook):
        model.saving()


def after_update_hooks(model: object, result: Any) -> None:
    if isinstance(model, UpdatedHook):
        model.updated(result)
    if isinstance(model, SavedHook):
        model.saved()


def before_delete_hooks(model: object) -> None:
    if isinstance(model, DeletingHook):
        model.deleting()


def after_delete_hooks(model: object, result: Any) -> None:
    if isinstance(model, DeletedHook):
        model.deleted(result)
