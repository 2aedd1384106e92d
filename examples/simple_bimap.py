"""
This example demonstrates the basic usage of BidirectionalMap.
A BidirectionalMap holds (key, value) pairs where each key is bound to exactly one value and each value to exactly one
key, so either side can be used to look up the other.

Methods ending in _fwd take a key and act on its value, methods ending in _rev take a value and act on its key.
"""

from bimap import BidirectionalMap
from bimap.utility.logging.utility import setup_logger


def main():
    setup_logger(logging_level="DEBUG")

    # A symbol table that maps names to numeric ids and back.
    symbols = BidirectionalMap()

    symbols.insert("alpha", 1)
    symbols.insert("beta", 2)

    assert symbols.get_fwd("alpha") == 1
    assert symbols.get_rev(2) == "beta"
    assert symbols.contains_fwd("beta") and symbols.contains_rev(1)

    # Lookups of missing entries return None, or the default you pass in. They never raise.
    assert symbols.get_fwd("gamma") is None
    assert symbols.get_rev(3, "unknown") == "unknown"

    # Inserting a pair whose key or value is already taken evicts the old pair from both directions. Here "alpha" was
    # bound to 1 and 2 was bound to "beta", so both of those pairs are dropped and only ("alpha", 2) is left. The
    # evictions are returned to the caller and logged at DEBUG level.
    result = symbols.insert("alpha", 2)
    assert result.forward_evicted == ("alpha", 1)
    assert result.reverse_evicted == ("beta", 2)

    assert len(symbols) == 1
    assert symbols.get_fwd("beta") is None
    assert symbols.get_rev(1) is None
    assert symbols.get_rev(2) == "alpha"

    # Removing by either side removes the pair from both directions.
    assert symbols.remove_rev(2) == "alpha"
    assert symbols.is_empty()

    # Keys and values are copied on insert, changing the caller's object afterwards does not change the map.
    tags = ["red"]
    registry = BidirectionalMap.from_dict({"palette": tuple(tags)})
    tags.append("green")
    assert registry.get_fwd("palette") == ("red",)

    print(f"{registry!r}: palette -> {registry.get_fwd('palette')}")


if __name__ == "__main__":
    main()
