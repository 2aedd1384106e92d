import logging

from bimap.duplicator import DeepCopyDuplicator

# ==============
# DUPLICATION OPTIONS

# used by BidirectionalMap when no duplicator is given, deep copy is always safe, switch to ImmutableDuplicator when
# keys and values are known to be immutable to skip the copying
DEFAULT_DUPLICATOR = DeepCopyDuplicator

# ==============
# LOGGING OPTIONS

# every pair evicted by an insert collision is logged at this level
EVICTION_LOGGING_LEVEL = logging.DEBUG
