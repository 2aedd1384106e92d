class BidirectionalMapError(Exception):
    pass


class DuplicationError(BidirectionalMapError):
    pass
