"""
Repository interfaces - Define contracts for data access
"""
from abc import ABC, abstractmethod
from typing import Optional


class IKeyValueStore(ABC):
    """Browser-local-storage style string store"""

    async def connect(self) -> None:
        """Open any underlying connection"""

    async def disconnect(self) -> None:
        """Close any underlying connection"""

    @abstractmethod
    async def get(self, key: str) -> Optional[str]:
        """Get a stored value, None if absent"""
        pass

    @abstractmethod
    async def set(self, key: str, value: str) -> bool:
        """Store a value, returns False if the write failed"""
        pass

    @abstractmethod
    async def delete(self, key: str) -> bool:
        """Remove a value, returns False if the delete failed"""
        pass
