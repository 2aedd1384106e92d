import logging
import unittest

from bimap import BidirectionalMap


def logging_test_name(obj: unittest.TestCase):
    logging.info(f"{obj.__class__.__name__}:{obj._testMethodName} ==============================================")


def assert_bijective(obj: unittest.TestCase, bimap: BidirectionalMap):
    forward = bimap._forward
    reverse = bimap._reverse

    obj.assertEqual(len(forward), len(reverse))
    obj.assertEqual(len(bimap), len(forward))

    for key, value in forward.items():
        obj.assertIn(value, reverse)
        obj.assertEqual(reverse[value], key)
        obj.assertEqual(bimap.get_rev(value), key)

    for value, key in reverse.items():
        obj.assertIn(key, forward)
        obj.assertEqual(forward[key], value)
        obj.assertEqual(bimap.get_fwd(key), value)
