__version__ = "1.0.0"

from fancychat.errors import (
    ChatError,
    IncompleteSegmentError,
    InvalidArgumentError,
    InvalidStyleError,
    MalformedWireInputError,
    UnknownColorError,
    UnknownStyleKeyError,
)
from fancychat.types.color import ChatColor, strip_color
from fancychat.types.text import (
    Literal,
    Localized,
    ScoreboardScore,
    Selector,
    localized_text,
    objective_score,
    raw_text,
    selector,
)
from fancychat.types.values import JsonString, NestedMessage
from fancychat.types.chat import Message, MessagePart
from fancychat.types.legacy import LegacyParser
