import logging
from typing import Any, Dict, Generic, Mapping, Optional, Type, TypeVar, Union

from bimap.config import DEFAULT_DUPLICATOR, EVICTION_LOGGING_LEVEL
from bimap.duplicator import Duplicator
from bimap.insert_result import InsertResult
from bimap.utility.exceptions import DuplicationError

KeyT = TypeVar("KeyT")
ValueT = TypeVar("ValueT")
DefaultT = TypeVar("DefaultT")

_MISSING = object()


class BidirectionalMap(Generic[KeyT, ValueT]):
    """
    A one-to-one map that answers lookups by key (`_fwd` methods) and by value (`_rev` methods) in O(1).

    Every key is bound to exactly one value and every value to exactly one key. Inserting a pair that shares its key or
    its value with stored pairs evicts those pairs from both directions, the evictions are reported in the returned
    InsertResult.

    Keys and values are stored as duplicates, one copy per direction, so the caller's objects stay independent of the
    map. For large payloads store a shared immutable handle and use ImmutableDuplicator to keep duplication cheap.

    Not thread safe, guard the whole map with a lock if it is shared.
    """

    def __init__(self, duplicator: Optional[Union[Duplicator, Type[Duplicator]]] = None):
        self._duplicator: Union[Duplicator, Type[Duplicator]] = (
            duplicator if duplicator is not None else DEFAULT_DUPLICATOR
        )

        self._forward: Dict[KeyT, ValueT] = dict()
        self._reverse: Dict[ValueT, KeyT] = dict()

    @classmethod
    def from_dict(
        cls, mapping: Mapping[KeyT, ValueT], duplicator: Optional[Union[Duplicator, Type[Duplicator]]] = None
    ) -> "BidirectionalMap[KeyT, ValueT]":
        """later items evict earlier items that share their value, same as inserting them one by one"""

        bimap = cls(duplicator=duplicator)
        for key, value in mapping.items():
            bimap.insert(key, value)

        return bimap

    def __len__(self) -> int:
        return len(self._forward)

    def __bool__(self) -> bool:
        return not self.is_empty()

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, BidirectionalMap):
            return NotImplemented

        return self._forward == other._forward

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(size={len(self)})"

    @property
    def duplicator(self) -> Union[Duplicator, Type[Duplicator]]:
        return self._duplicator

    def is_empty(self) -> bool:
        return not self._forward

    def insert(self, key: KeyT, value: ValueT) -> InsertResult[KeyT, ValueT]:
        old_value = self._forward.get(key, _MISSING)
        old_key = self._reverse.get(value, _MISSING)

        # copy everything before touching the indices, a failed copy must leave the map as it was
        forward_key, forward_value = self.__duplicate(key), self.__duplicate(value)
        reverse_value, reverse_key = self.__duplicate(value), self.__duplicate(key)

        forward_evicted = None
        if old_value is not _MISSING and old_value is not value and old_value != value:
            del self._reverse[old_value]
            forward_evicted = (key, old_value)

        reverse_evicted = None
        if old_key is not _MISSING and old_key is not key and old_key != key:
            del self._forward[old_key]
            reverse_evicted = (old_key, value)

        # pop first so the fresh key copies replace the stored ones, plain assignment would keep the old key objects
        self._forward.pop(key, None)
        self._reverse.pop(value, None)
        self._forward[forward_key] = forward_value
        self._reverse[reverse_value] = reverse_key

        result = InsertResult(forward_evicted=forward_evicted, reverse_evicted=reverse_evicted)
        for evicted_key, evicted_value in result.evicted_pairs():
            logging.log(
                EVICTION_LOGGING_LEVEL,
                f"{self.__class__.__name__}: inserting ({key!r}, {value!r}) "
                f"evicted ({evicted_key!r}, {evicted_value!r})",
            )

        return result

    def get_fwd(self, key: KeyT, default: DefaultT = None) -> Union[ValueT, DefaultT]:
        return self._forward.get(key, default)

    def get_rev(self, value: ValueT, default: DefaultT = None) -> Union[KeyT, DefaultT]:
        return self._reverse.get(value, default)

    def contains_fwd(self, key: KeyT) -> bool:
        return key in self._forward

    def contains_rev(self, value: ValueT) -> bool:
        return value in self._reverse

    def remove_fwd(self, key: KeyT, default: DefaultT = None) -> Union[ValueT, DefaultT]:
        value = self._forward.pop(key, _MISSING)
        if value is _MISSING:
            return default

        del self._reverse[value]
        return value

    def remove_rev(self, value: ValueT, default: DefaultT = None) -> Union[KeyT, DefaultT]:
        key = self._reverse.pop(value, _MISSING)
        if key is _MISSING:
            return default

        del self._forward[key]
        return key

    def clear(self):
        self._forward.clear()
        self._reverse.clear()

    def copy(self) -> "BidirectionalMap[KeyT, ValueT]":
        """independent map holding fresh duplicates of every pair, using the same duplicator"""

        return self.__class__.from_dict(self._forward, duplicator=self._duplicator)

    def __duplicate(self, obj: Any) -> Any:
        try:
            duplicate = self._duplicator.duplicate(obj)
            equivalent = duplicate is obj or (duplicate == obj and hash(duplicate) == hash(obj))
        except Exception as e:
            logging.error(f"{self.__class__.__name__}: failed to duplicate {obj!r} with {self._duplicator!r}: {e!r}")
            raise DuplicationError(f"cannot duplicate {obj!r}") from e

        # the stored copy must stay reachable through the caller's object, identity hashed objects never are
        if not equivalent:
            logging.error(f"{self.__class__.__name__}: {self._duplicator!r} copied {obj!r} into an unequal object")
            raise DuplicationError(f"duplicate of {obj!r} does not compare equal or hash the same as the original")

        return duplicate
