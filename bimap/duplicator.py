import abc
import copy
import pickle
from typing import Any

import cloudpickle


class Duplicator(metaclass=abc.ABCMeta):
    @staticmethod
    @abc.abstractmethod
    def duplicate(obj: Any) -> Any:
        """
        Produce an independent copy of the object, BidirectionalMap calls this for EACH key and EACH value it stores,
        once per direction, so every inserted pair is held as two copies of the key and two copies of the value, for
        example:

        bimap = BidirectionalMap()
        bimap.insert(key, value)

        The forward index holds duplicate(key) -> duplicate(value) and the reverse index holds
        duplicate(value) -> duplicate(key), mutating the caller's key or value afterwards must not change what the map
        stores

        The returned object must be the original itself or compare equal to and hash the same as it, BidirectionalMap
        checks this and rejects objects with identity based equality, like plain class instances, unless the duplicator
        returns them unchanged. Any exception raised here aborts the insert before either index is touched

        :param obj: the key or value to be duplicated
        :return: an object equal to obj that shares no mutable state with it
        """

        raise NotImplementedError()


class DeepCopyDuplicator(Duplicator):
    @staticmethod
    def duplicate(obj: Any) -> Any:
        return copy.deepcopy(obj)


class CloudPickleDuplicator(Duplicator):
    """
    Round trips through cloudpickle, functions and locally defined classes held in keys or values are copied by value
    where deepcopy would share them
    """

    @staticmethod
    def duplicate(obj: Any) -> Any:
        return cloudpickle.loads(cloudpickle.dumps(obj, protocol=pickle.HIGHEST_PROTOCOL))


class ImmutableDuplicator(Duplicator):
    """
    Returns the object itself. Only use this when keys and values are immutable (str, int, bytes, tuples of those,
    frozen dataclasses) or are shared handles to an immutable payload, then the copy is free and still independent
    """

    @staticmethod
    def duplicate(obj: Any) -> Any:
        return obj
