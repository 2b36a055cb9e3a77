from .client import Caller, Use, Release, get_client
from .errors import ZsetProtoError, InvalidArgumentShape
from .zsets import ZAddFlags, Pairs, Single, score_members_from_args, encode_add, encode_range, encode_remove, ZAdd, ZRange, ZRem
