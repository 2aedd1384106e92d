"""
This example shows how to keep large payloads in a BidirectionalMap without copying them.

BidirectionalMap stores two copies of every key and value, one per direction, made by its duplicator (deep copy by
default). For large payloads, store an immutable handle to the payload instead and use ImmutableDuplicator, then both
directions share the same handle and inserting costs no copying.
"""

import dataclasses
import hashlib

from bimap import BidirectionalMap, ImmutableDuplicator
from bimap.utility.logging.utility import setup_logger


@dataclasses.dataclass(frozen=True)
class Blob:
    digest: bytes
    content: bytes = dataclasses.field(compare=False, repr=False)

    @staticmethod
    def from_content(content: bytes) -> "Blob":
        return Blob(hashlib.md5(content).digest(), content)


def main():
    setup_logger()

    # Blob is frozen, so sharing one instance between the caller and both directions of the map is safe.
    blobs = BidirectionalMap(duplicator=ImmutableDuplicator)

    big = Blob.from_content(b"x" * 10_000_000)
    small = Blob.from_content(b"hello")

    blobs.insert("big", big)
    blobs.insert("small", small)

    assert blobs.get_fwd("big") is big
    assert blobs.get_rev(Blob.from_content(b"hello")) == "small"

    # Renaming a blob is an insert with the new name, the old name is evicted.
    result = blobs.insert("greeting", small)
    assert result.reverse_evicted == ("small", small)
    assert not blobs.contains_fwd("small")

    print(f"{blobs!r}: greeting -> {blobs.get_fwd('greeting')}")


if __name__ == "__main__":
    main()
