import dataclasses
from typing import Generic, List, Optional, Tuple, TypeVar

KeyT = TypeVar("KeyT")
ValueT = TypeVar("ValueT")


@dataclasses.dataclass(frozen=True)
class InsertResult(Generic[KeyT, ValueT]):
    # (key, old value) dropped because the inserted key was bound to another value
    forward_evicted: Optional[Tuple[KeyT, ValueT]] = dataclasses.field(default=None)

    # (old key, value) dropped because the inserted value was bound to another key
    reverse_evicted: Optional[Tuple[KeyT, ValueT]] = dataclasses.field(default=None)

    def __bool__(self) -> bool:
        return self.has_evictions()

    def has_evictions(self) -> bool:
        return self.forward_evicted is not None or self.reverse_evicted is not None

    def evicted_pairs(self) -> List[Tuple[KeyT, ValueT]]:
        return [pair for pair in (self.forward_evicted, self.reverse_evicted) if pair is not None]
