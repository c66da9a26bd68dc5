# moviehub/core/models/results.py
from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class LoadSuccess(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class LoadFailure:
    message: str

    @property
    def ok(self) -> bool:
        return False


LoadResult = Union[LoadSuccess[T], LoadFailure]
