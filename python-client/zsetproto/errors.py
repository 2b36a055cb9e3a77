class ZsetProtoError(Exception):
    """Base class for errors raised locally by zsetproto."""


class InvalidArgumentShape(ZsetProtoError, ValueError):
    """ZADD got score/member arguments that are neither pairs nor one literal pair.

    ``count`` is how many values the rejected shape held: bare arguments, or
    pairs when a sequence was given. ``index`` is set only when one element of a
    pair sequence is malformed.
    """

    def __init__(self, message, count=None, index=None):
        super().__init__(message)
        self.count = count
        self.index = index
