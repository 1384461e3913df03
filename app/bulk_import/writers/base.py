from abc import ABC, abstractmethod
from typing import Any

from app.bulk_import.schemas import ImportRequest


class RecordWriter(ABC):
    """System of record that persists imported rows and owns duplicate matching."""

    @abstractmethod
    async def write(self, request: ImportRequest) -> dict[str, Any]:
        """Submit one import and return the writer's raw JSON response body."""
        ...
