"""
Conversion between :class:`~fancychat.types.chat.Message` and the JSON
chat format understood by the Minecraft client.

A message with one part is written as that part's object. Longer messages
are written as ``{"text": "", "extra": [...]}`` because the format only
has a single top-level node plus its children. Reading always expects that
wrapped shape.
"""

import json
from twisted import logger as log

from fancychat.errors import (
    IncompleteSegmentError,
    InvalidArgumentError,
    MalformedWireInputError,
)
from fancychat.types.chat import Message, MessagePart
from fancychat.types.color import ChatColor, NAMES_TO_STYLES, STYLES_TO_NAMES
from fancychat.types.text import (
    Literal,
    Localized,
    ScoreboardScore,
    Selector,
    is_text_key,
)
from fancychat.types.values import JsonString, NestedMessage

logger = log.Logger(namespace=__name__)


# Serialization ---------------------------------------------------------------


def dumps(message, wrap=False, separators=(",", ":")):
    return json.dumps(
        message_to_json(message, wrap), separators=separators, ensure_ascii=False
    )


def message_to_json(message, wrap=False):
    """
    Returns the wire format of *message*. With *wrap*, even a single part
    is put in an ``extra`` array so that :func:`message_from_json` can read
    it back.
    """
    parts = list(message)
    if len(parts) == 1 and not wrap:
        return part_to_json(parts[0])
    return {"text": "", "extra": [part_to_json(part) for part in parts]}


def part_to_json(part):
    if not part.has_text():
        raise IncompleteSegmentError("message part has no text")

    obj = text_to_json(part.text)
    obj["color"] = part.color.name.lower()
    for style in part.styles:
        obj[STYLES_TO_NAMES[style]] = True
    if part.has_click():
        obj["clickEvent"] = {
            "action": part.click_action_name,
            "value": part.click_action_data,
        }
    if part.has_hover():
        obj["hoverEvent"] = {
            "action": part.hover_action_name,
            "value": value_to_json(part.hover_action_data),
        }
    if part.insertion is not None:
        obj["insertion"] = part.insertion
    if part.translation_args and isinstance(part.text, Localized):
        obj["with"] = [value_to_json(arg) for arg in part.translation_args]
    return obj


def text_to_json(text):
    if isinstance(text, Literal):
        return {text.key: text.text}
    if isinstance(text, Localized):
        return {text.key: text.translate_key}
    if isinstance(text, ScoreboardScore):
        return {text.key: {"name": text.player, "objective": text.objective}}
    if isinstance(text, Selector):
        return {text.key: text.selector}
    raise TypeError("Not a text component: %r" % (text,))


def value_to_json(value):
    if isinstance(value, JsonString):
        return value.value
    if isinstance(value, NestedMessage):
        return message_to_json(value.message)
    raise TypeError("Not a JSON value: %r" % (value,))


# Deserialization -------------------------------------------------------------


def loads(data, message_class=Message):
    try:
        obj = json.loads(data)
    except ValueError as e:
        raise MalformedWireInputError("Invalid JSON: %s" % e) from e
    return message_from_json(obj, message_class)


def message_from_json(obj, message_class=Message):
    if not isinstance(obj, dict):
        raise MalformedWireInputError("Expected a JSON object, got %r" % (obj,))
    extra = obj.get("extra")
    if not isinstance(extra, list):
        raise MalformedWireInputError("Message has no 'extra' array")

    return message_class.from_parts(
        part_from_json(element, message_class) for element in extra
    )


def part_from_json(obj, message_class=Message):
    if not isinstance(obj, dict):
        raise MalformedWireInputError("Expected a message part, got %r" % (obj,))

    part = MessagePart()
    for key, value in obj.items():
        if is_text_key(key):
            part.text = text_from_json(key, value)

        elif key in NAMES_TO_STYLES:
            if value is True:
                part.add_style(ChatColor.by_style_name(key))

        elif key == "color":
            part.color = ChatColor.by_name(value)

        elif key == "clickEvent":
            action, data = _event_from_json(key, value)
            part.click_action_name = action
            part.click_action_data = _as_string(data, key)

        elif key == "hoverEvent":
            action, data = _event_from_json(key, value)
            part.hover_action_name = action
            part.hover_action_data = value_from_json(data, message_class)

        elif key == "insertion":
            part.insertion = _as_string(value, key)

        elif key == "with":
            if not isinstance(value, list):
                raise MalformedWireInputError("'with' must be an array")
            part.translation_args = [value_from_json(v, message_class) for v in value]

        else:
            logger.debug("Ignoring unknown message field {key}", key=key)

    if not part.has_text():
        raise MalformedWireInputError("message part has no text")
    return part


def text_from_json(key, value):
    try:
        return _text_from_json(key, value)
    except InvalidArgumentError as e:
        raise MalformedWireInputError(str(e)) from e


def _text_from_json(key, value):
    if isinstance(value, dict):
        if key != ScoreboardScore.key:
            raise MalformedWireInputError("%r must be a plain value" % key)
        try:
            name, objective = value["name"], value["objective"]
        except KeyError as e:
            raise MalformedWireInputError("score is missing %s" % e) from None
        return ScoreboardScore(_as_string(name, "name"), _as_string(objective, "objective"))

    value = _as_string(value, key)
    if key == Literal.key:
        return Literal(value)
    if key == Localized.key:
        return Localized(value)
    if key == Selector.key:
        return Selector(value)
    raise MalformedWireInputError("score must be an object")


def value_from_json(value, message_class=Message):
    """
    Reads a hover value or translation argument: either a plain string or
    a nested message, which may be in any of the shapes the client accepts.
    """
    if isinstance(value, list):
        value = {"text": "", "extra": value}
    elif isinstance(value, dict):
        # A parent with children keeps only the children, as in the top level
        if "extra" not in value:
            value = {"text": "", "extra": [value]}
    else:
        return JsonString(_as_string(value, "value"))

    return NestedMessage(message_from_json(value, message_class))


def _event_from_json(key, value):
    if not isinstance(value, dict):
        raise MalformedWireInputError("%s must be an object" % key)
    try:
        return _as_string(value["action"], key), value["value"]
    except KeyError as e:
        raise MalformedWireInputError("%s is missing %s" % (key, e)) from None


def _as_string(value, key):
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    raise MalformedWireInputError("%s must be a plain value, got %r" % (key, value))
