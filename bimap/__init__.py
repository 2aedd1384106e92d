from .about import __version__
from .bidirectional_map import BidirectionalMap
from .duplicator import CloudPickleDuplicator, DeepCopyDuplicator, Duplicator, ImmutableDuplicator
from .insert_result import InsertResult
from .utility.exceptions import BidirectionalMapError, DuplicationError

assert isinstance(__version__, str)
assert isinstance(BidirectionalMap, type)
assert isinstance(InsertResult, type)
assert isinstance(Duplicator, type)
assert isinstance(DuplicationError, type)
