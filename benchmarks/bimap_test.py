import random

import psutil

from bimap import BidirectionalMap, DeepCopyDuplicator, ImmutableDuplicator
from bimap.utility.logging.scoped_logger import ScopedLogger
from bimap.utility.logging.utility import setup_logger

NUMBER_OF_PAIRS = 100_000


def format_bytes(number: float) -> str:
    for unit in ["B", "K", "M", "G"]:
        if number < 1024.0:
            return f"{number:.1f}{unit}"
        number /= 1024.0

    return f"{number:.1f}T"


def run(duplicator, pairs):
    process = psutil.Process()
    memory_before = process.memory_info().rss

    bimap = BidirectionalMap(duplicator=duplicator)
    with ScopedLogger(f"{duplicator.__name__} insert {len(pairs)} pairs"):
        for key, value in pairs:
            bimap.insert(key, value)

    with ScopedLogger(f"{duplicator.__name__} lookup {len(pairs)} pairs in both directions"):
        for key, value in pairs:
            assert bimap.get_fwd(key) == value
            assert bimap.get_rev(value) == key

    with ScopedLogger(f"{duplicator.__name__} remove {len(pairs)} pairs"):
        for key, _ in pairs:
            bimap.remove_fwd(key)

    assert bimap.is_empty()
    print(f"{duplicator.__name__}: resident memory grew by {format_bytes(process.memory_info().rss - memory_before)}")


def main():
    setup_logger()

    values = random.sample(range(NUMBER_OF_PAIRS * 10), NUMBER_OF_PAIRS)
    pairs = [(f"symbol-{i}", value) for i, value in enumerate(values)]

    run(ImmutableDuplicator, pairs)
    run(DeepCopyDuplicator, pairs)


if __name__ == "__main__":
    main()
