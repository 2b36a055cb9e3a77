"""Sorted-set commands: ZADD, ZRANGE and ZREM.

The ``encode_*`` functions only build the command token list. The
``ZAdd``/``ZRange``/``ZRem`` wrappers encode and then send the tokens through
the installed collaborator (see :func:`zsetproto.client.Use`), returning its
reply untouched.
"""
import logging
from dataclasses import dataclass

from .client import get_client
from .errors import InvalidArgumentShape

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ZAddFlags:
    """ZADD options. Each one set adds its token; NX/XX conflicts are left to the server."""
    only_if_not_exists: bool = False
    only_if_exists: bool = False
    return_changed_count: bool = False
    increment_mode: bool = False

    @classmethod
    def from_options(cls, nx=False, xx=False, change=False, increment=False):
        return cls(
            only_if_not_exists=nx,
            only_if_exists=xx,
            return_changed_count=change,
            increment_mode=increment,
        )

    def tokens(self):
        # Order is fixed: NX, XX, CH, INCR.
        args = []
        if self.only_if_not_exists: args.append("NX")
        if self.only_if_exists: args.append("XX")
        if self.return_changed_count: args.append("CH")
        if self.increment_mode: args.append("INCR")
        return args


@dataclass(frozen=True)
class Pairs:
    """An ordered sequence of (score, member) pairs."""
    pairs: tuple

    def __post_init__(self):
        try:
            items = tuple(self.pairs)
        except TypeError:
            raise InvalidArgumentShape(
                f"expected a sequence of (score, member) pairs, got {type(self.pairs).__name__}",
                count=1,
            ) from None
        normalized = []
        for i, pair in enumerate(items):
            if not isinstance(pair, (list, tuple)) or len(pair) != 2:
                raise InvalidArgumentShape(
                    f"element {i} is not a (score, member) pair: {pair!r}",
                    count=len(items),
                    index=i,
                )
            normalized.append((pair[0], pair[1]))
        object.__setattr__(self, "pairs", tuple(normalized))

    def tokens(self):
        args = []
        for score, member in self.pairs:
            args.extend([score, member])
        return args


@dataclass(frozen=True)
class Single:
    """Exactly one literal score and member."""
    score: object
    member: object

    def tokens(self):
        return [self.score, self.member]


def score_members_from_args(*args):
    """Resolves the loose ZADD argument forms into a Pairs or Single.

    Accepted: one list/tuple of pairs, exactly two bare values (score, member),
    or an already built Pairs/Single. Anything else raises InvalidArgumentShape.
    """
    if len(args) == 1:
        value = args[0]
        if isinstance(value, (Pairs, Single)):
            return value
        if isinstance(value, (list, tuple)):
            return Pairs(tuple(value))
    elif len(args) == 2:
        if not any(isinstance(a, (list, tuple, Pairs, Single)) for a in args):
            return Single(args[0], args[1])
    logger.debug("Rejected ZADD score/member shape with %d arguments", len(args))
    raise InvalidArgumentShape(
        f"wrong number of arguments: expected a sequence of (score, member) pairs "
        f"or one score and one member, got {len(args)}",
        count=len(args),
    )


def encode_add(key, *score_members, flags=None):
    """Builds ``ZADD key [NX] [XX] [CH] [INCR] score member [score member ...]``."""
    entries = score_members_from_args(*score_members)
    if flags is None:
        flags = ZAddFlags()
    return ["ZADD", key, *flags.tokens(), *entries.tokens()]

def encode_range(key, start, stop, with_scores=False):
    """Builds ``ZRANGE key start stop [WITHSCORES]``; negative indices count from the end."""
    args = ["ZRANGE", key, start, stop]
    if with_scores: args.append("WITHSCORES")
    return args

def encode_remove(key, member):
    """Builds ``ZREM key member`` for a single member."""
    return ["ZREM", key, member]


def _send(tokens):
    logger.debug("Sending %s with %d arguments", tokens[0], len(tokens) - 1)
    return get_client().call(*tokens)

def ZAdd(key, *args, flags=None, nx=False, xx=False, change=False, increment=False):
    """
    Add one or more members to a sorted set, or update the score of existing ones.
    args: either one list of (score, member) pairs, or a single score and member.
    Options can be given as nx/xx/change/increment or as a ZAddFlags, not both.
    """
    if flags is not None and (nx or xx or change or increment):
        raise TypeError("pass either flags or nx/xx/change/increment, not both")
    if flags is None:
        flags = ZAddFlags.from_options(nx=nx, xx=xx, change=change, increment=increment)
    return _send(encode_add(key, *args, flags=flags))

def ZRange(key, start, stop, with_scores=False):
    """Return a range of members in a sorted set, by index."""
    return _send(encode_range(key, start, stop, with_scores=with_scores))

def ZRem(key, member):
    """Remove a member from a sorted set."""
    return _send(encode_remove(key, member))
