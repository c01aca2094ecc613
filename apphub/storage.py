from abc import ABC, abstractmethod
from typing import Dict, List, Optional

class KeyValueStore(ABC):
    """String key/value store with session lifetime (``sessionStorage`` shape)."""

    @abstractmethod
    def get_item(self, key: str) -> Optional[str]:
        ...

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        ...

    @abstractmethod
    def remove_item(self, key: str) -> None:
        """Delete ``key``; missing keys are ignored."""

    @abstractmethod
    def keys(self) -> List[str]:
        ...

    def has_item(self, key: str) -> bool:
        return self.get_item(key) is not None

    def clear(self) -> None:
        for key in self.keys():
            self.remove_item(key)

class MemoryStore(KeyValueStore):
    """In-process store; contents die with the object."""

    def __init__(self, initial: Dict[str, str] | None = None) -> None:
        self._data: Dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._data[key] = str(value)

    def remove_item(self, key: str) -> None:
        self._data.pop(key, None)

    def has_item(self, key: str) -> bool:
        return key in self._data

    def keys(self) -> List[str]:
        return list(self._data)

    def clear(self) -> None:
        self._data.clear()

    def __len__(self) -> int:
        return len(self._data)
