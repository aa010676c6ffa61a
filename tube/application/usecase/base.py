"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services.

    Each use case backs one external operation and maps pydantic request
    models to domain calls and domain results to response models.
    """

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass
