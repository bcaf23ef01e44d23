"""Base use case."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from pydantic import BaseModel

RequestT = TypeVar("RequestT", bound=BaseModel)
ResponseT = TypeVar("ResponseT", bound=BaseModel)


class BaseUseCase(ABC, Generic[RequestT, ResponseT]):
    """Base use case: one request model in, one response model out.

    Use cases turn interface input into domain calls. They receive the
    per-request context inside the request model and never read request
    state themselves.
    """

    @abstractmethod
    async def execute(self, request: RequestT) -> ResponseT:
        pass
