from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")
ID = TypeVar("ID")


class Repository(ABC, Generic[T, ID]):
    """Repository 基底クラス

    - エンティティの保管を抽象化する
    - 本アプリではプロセス内メモリのみを保管先とする
    """

    @abstractmethod
    def save(self, entity: T) -> None:
        """エンティティを保存する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, id: ID) -> T | None:
        """IDでエンティティを検索する"""
        raise NotImplementedError

    @abstractmethod
    def find_all(self) -> list[T]:
        """保存済みのエンティティをすべて返す"""
        raise NotImplementedError

    @abstractmethod
    def clear(self) -> None:
        """保存済みのエンティティをすべて削除する"""
        raise NotImplementedError
