from abc import abstractmethod
from typing import TypeVar, Protocol, Any

K = TypeVar("K", bound="Comparable")


class Comparable(Protocol):
    """Keys that can live in a heap: totally ordered through `<` and `==`."""

    @abstractmethod
    def __eq__(self, other: Any) -> bool:
        pass

    @abstractmethod
    def __lt__(self: K, other: Any) -> bool:
        pass

    def __gt__(self: K, other: Any) -> bool:
        return (not self < other) and self != other

    def __ge__(self: K, other: Any) -> bool:
        return not self < other
