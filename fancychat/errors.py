class ChatError(Exception):
    pass


class InvalidStyleError(ChatError, ValueError):
    """A format was passed where a colour is expected, or vice versa."""


class InvalidArgumentError(ChatError, ValueError):
    pass


class IncompleteSegmentError(ChatError):
    """The current message part has no text yet."""


class MalformedWireInputError(ChatError, ValueError):
    """JSON input does not have the shape of a chat message."""


class UnknownColorError(MalformedWireInputError):
    pass


class UnknownStyleKeyError(MalformedWireInputError):
    pass
