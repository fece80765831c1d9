"""Storage backends selected through functional options."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Callable


@dataclass(frozen=True)
class Data:
    """A stored record."""


class Repository(ABC):
    """Something that stores data records."""

    @abstractmethod
    def add(self, data: Data) -> None:
        """Persist a record."""

    @abstractmethod
    def get_all(self) -> list[Data]:
        """Return every stored record."""


@dataclass
class MemoryRepository(Repository):
    """Keeps records in memory."""

    items: list[Data] = field(default_factory=list)

    def add(self, data: Data) -> None:
        self.items.append(data)

    def get_all(self) -> list[Data]:
        return list(self.items)


@dataclass
class MongoRepository(Repository):
    """MongoDB backend; it stores nothing yet."""

    def add(self, data: Data) -> None:
        return None

    def get_all(self) -> list[Data]:
        return []


@dataclass
class MySQLRepository(Repository):
    """MySQL backend; it stores nothing yet."""

    def add(self, data: Data) -> None:
        return None

    def get_all(self) -> list[Data]:
        return []


@dataclass
class StorageOptions:
    memory_driver: MemoryRepository | None = None
    mongo_driver: MongoRepository | None = None
    mysql_driver: MySQLRepository | None = None


@dataclass
class Storage(StorageOptions):
    """A storage configured with its drivers."""


Option = Callable[[StorageOptions], None]


def with_memory_repository() -> Option:
    """Option that makes sure the storage has an in-memory driver."""

    def apply(options: StorageOptions) -> None:
        if options.memory_driver is None:
            options.memory_driver = MemoryRepository()

    return apply


def new_storage(*args: Option) -> Storage:
    """Build a storage with an in-memory driver, then apply the options."""
    storage = Storage(memory_driver=MemoryRepository())
    for option in args:
        option(storage)
    return storage


def main(argv: list[str] | None = None) -> int:
    """Create and print an in-memory storage."""
    storage = new_storage(with_memory_repository())
    print(storage)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())