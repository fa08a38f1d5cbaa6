"""
Values that the wire format allows to be either a plain string or a whole
chat message: hover event payloads and translation arguments.
"""

from fancychat.errors import InvalidArgumentError


class JsonString(object):
    def __init__(self, value):
        self.value = value

    def copy(self):
        return JsonString(self.value)

    def __eq__(self, other):
        return isinstance(other, JsonString) and self.value == other.value

    def __hash__(self):
        return hash(self.value)

    def __str__(self):
        return self.value

    def __repr__(self):
        return "<JsonString %r>" % self.value


class NestedMessage(object):
    def __init__(self, message):
        self.message = message

    def copy(self):
        return NestedMessage(self.message.copy())

    def __eq__(self, other):
        return isinstance(other, NestedMessage) and self.message == other.message

    __hash__ = None

    def __str__(self):
        return self.message.to_string()

    def __repr__(self):
        return "<NestedMessage %r>" % self.message


def to_json_value(obj):
    """Wraps a string or a message as a JSON value."""
    from fancychat.types.chat import Message

    if isinstance(obj, (JsonString, NestedMessage)):
        return obj
    if isinstance(obj, str):
        return JsonString(obj)
    if isinstance(obj, Message):
        return NestedMessage(obj)
    raise InvalidArgumentError("Cannot use %r as a JSON value" % (obj,))
