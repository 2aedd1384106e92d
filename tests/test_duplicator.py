import dataclasses
import unittest
from typing import Callable

from bimap import BidirectionalMap, CloudPickleDuplicator, DeepCopyDuplicator, DuplicationError, ImmutableDuplicator
from bimap.utility.logging.utility import setup_logger
from tests.utility import assert_bijective, logging_test_name


@dataclasses.dataclass(frozen=True)
class Handler:
    name: str
    callback: Callable = dataclasses.field(compare=False, hash=False)


class TestDuplicator(unittest.TestCase):
    def setUp(self) -> None:
        setup_logger()
        logging_test_name(self)

    def test_deep_copy_duplicator(self):
        obj = (1, frozenset({"a", "b"}))
        copied = DeepCopyDuplicator.duplicate(obj)
        self.assertEqual(copied, obj)
        self.assertEqual(hash(copied), hash(obj))

        nested = {"numbers": [1, 2, 3]}
        copied = DeepCopyDuplicator.duplicate(nested)
        copied["numbers"].append(4)
        self.assertListEqual(nested["numbers"], [1, 2, 3])

    def test_cloud_pickle_duplicator(self):
        nested = {"numbers": [1, 2, 3]}
        copied = CloudPickleDuplicator.duplicate(nested)
        self.assertEqual(copied, nested)
        self.assertIsNot(copied["numbers"], nested["numbers"])

        square = CloudPickleDuplicator.duplicate(lambda x: x * x)
        self.assertEqual(square(4), 16)

    def test_cloud_pickle_duplicator_with_map(self):
        bimap = BidirectionalMap(duplicator=CloudPickleDuplicator)
        handler = Handler("double", lambda x: x * 2)
        bimap.insert(handler, 7)

        stored = bimap.get_rev(7)
        self.assertEqual(stored, handler)
        self.assertIsNot(stored, handler)
        self.assertEqual(stored.callback(3), 6)
        self.assertEqual(bimap.get_fwd(Handler("double", print)), 7)
        assert_bijective(self, bimap)

    def test_immutable_duplicator(self):
        obj = ("a", 1)
        self.assertIs(ImmutableDuplicator.duplicate(obj), obj)

    def test_duplicator_instance(self):
        bimap = BidirectionalMap(duplicator=DeepCopyDuplicator())
        bimap.insert("a", 1)
        self.assertEqual(bimap.get_fwd("a"), 1)
        self.assertIsInstance(bimap.duplicator, DeepCopyDuplicator)

    def test_default_duplicator_is_deep_copy(self):
        self.assertIs(BidirectionalMap().duplicator, DeepCopyDuplicator)

    def test_failed_duplication_is_wrapped(self):
        class Stubborn:
            def __hash__(self):
                return 1

            def __eq__(self, other):
                return isinstance(other, Stubborn)

            def __deepcopy__(self, memo):
                raise RuntimeError("refusing to copy")

        bimap = BidirectionalMap()
        with self.assertRaises(DuplicationError) as context:
            bimap.insert(Stubborn(), 1)

        self.assertIsInstance(context.exception.__cause__, RuntimeError)
        self.assertTrue(bimap.is_empty())
        assert_bijective(self, bimap)
