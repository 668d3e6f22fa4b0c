"""Resolve abbreviated date/time tokens ("5_16-00", "9:30", "14") to timestamps.

Everything here is pure: the reference time is passed in, never read from the clock
unless omitted.
"""

from .types import TokenFields, TokenFormat, TokenParts
from .parsers import FORMATS, match_format, preprocess_token, split_token
from .resolve import format_timestamp, resolve
