"""Contract storage: the router config record.

Storage is a plain ``MutableMapping[str, bytes]``; values are pydantic models
stored as JSON under a fixed key.
"""

from collections.abc import MutableMapping
from typing import Generic, TypeVar

from pydantic import BaseModel

from swap_router.errors import ConfigNotFound, RouterError
from swap_router.models.types import Addr

ModelT = TypeVar("ModelT", bound=BaseModel)

Storage = MutableMapping[str, bytes]


class Config(BaseModel):
    """Router configuration, written once at instantiation."""

    factory_addr: Addr


class Item(Generic[ModelT]):
    """A single model stored under a fixed key."""

    def __init__(
        self,
        key: str,
        model: type[ModelT],
        not_found: type[RouterError] = RouterError,
    ) -> None:
        self.key = key
        self.model = model
        self.not_found = not_found

    def may_load(self, storage: Storage) -> ModelT | None:
        raw = storage.get(self.key)
        if raw is None:
            return None
        return self.model.model_validate_json(raw)

    def load(self, storage: Storage) -> ModelT:
        """Load the stored value.

        Raises:
            RouterError: The configured ``not_found`` error if nothing is stored
        """
        value = self.may_load(storage)
        if value is None:
            raise self.not_found(f"{self.model.__name__} not found at key '{self.key}'")
        return value

    def save(self, storage: Storage, value: ModelT) -> None:
        storage[self.key] = value.model_dump_json().encode("utf-8")


CONFIG: Item[Config] = Item("config", Config, not_found=ConfigNotFound)
