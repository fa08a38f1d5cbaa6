import functools

from fancychat.errors import (
    IncompleteSegmentError,
    InvalidArgumentError,
    InvalidStyleError,
)
from fancychat.types.color import ChatColor, strip_color
from fancychat.types.text import Literal, TEXT_TYPES
from fancychat.types.values import JsonString, to_json_value


def _text_content(content):
    if content is None or isinstance(content, TEXT_TYPES):
        return content
    if isinstance(content, str):
        return Literal(content)
    raise InvalidArgumentError("Cannot use %r as message text" % (content,))


class MessagePart(object):
    """
    One run of a chat message that shares a colour, a set of styles and
    the same click/hover behaviour.
    """

    def __init__(self, text=None):
        self.text = _text_content(text)
        self.color = ChatColor.WHITE
        self.styles = []
        self.click_action_name = None
        self.click_action_data = None
        self.hover_action_name = None
        self.hover_action_data = None
        self.insertion = None
        self.translation_args = []

    def has_text(self):
        return self.text is not None

    def has_click(self):
        return self.click_action_name is not None and self.click_action_data is not None

    def has_hover(self):
        return self.hover_action_name is not None and self.hover_action_data is not None

    def add_style(self, style):
        if style not in self.styles:
            self.styles.append(style)

    def copy(self):
        part = MessagePart(self.text)
        part.color = self.color
        part.styles = list(self.styles)
        part.click_action_name = self.click_action_name
        part.click_action_data = self.click_action_data
        part.hover_action_name = self.hover_action_name
        if self.hover_action_data is not None:
            part.hover_action_data = self.hover_action_data.copy()
        part.insertion = self.insertion
        part.translation_args = [arg.copy() for arg in self.translation_args]
        return part

    def to_legacy_string(self):
        text = str(self.color)
        text += "".join(str(style) for style in self.styles)
        if self.text is not None:
            text += self.text.readable
        return text

    def __eq__(self, other):
        if not isinstance(other, MessagePart):
            return NotImplemented
        return (
            self.text == other.text
            and self.color == other.color
            and set(self.styles) == set(other.styles)
            and self.click_action_name == other.click_action_name
            and self.click_action_data == other.click_action_data
            and self.hover_action_name == other.hover_action_name
            and self.hover_action_data == other.hover_action_data
            and self.insertion == other.insertion
            and self.translation_args == other.translation_args
        )

    __hash__ = None

    def __repr__(self):
        return "<MessagePart %r %s>" % (self.text, self.to_legacy_string())


@functools.total_ordering
class Message(object):
    """
    Represents a Minecraft chat message as a list of parts. Builder methods
    act on the last part and return the message, so calls can be chained::

        Message("Click ").then("here").set_color("gold").link(url)
    """

    #: Class used by :meth:`from_legacy_text`. ``None`` selects
    #: :class:`~fancychat.types.legacy.LegacyParser`.
    legacy_parser = None

    #: Passed to :func:`json.dumps` by :meth:`to_json`.
    json_separators = (",", ":")

    def __init__(self, text=None):
        self.parts = [MessagePart(text)]
        self._json = None
        self._dirty = False

    @classmethod
    def from_parts(cls, parts):
        message = cls()
        message.parts = list(parts) or [MessagePart(Literal(""))]
        return message

    @classmethod
    def from_string(cls, string):
        return cls(Literal(string))

    @classmethod
    def from_legacy_text(cls, text):
        """
        Parses text containing legacy formatting codes (U+00A7 plus one
        character). Bare URLs become clickable.
        """
        parser = cls.legacy_parser
        if parser is None:
            from fancychat.types.legacy import LegacyParser as parser

        return parser(message_class=cls).parse(text)

    @classmethod
    def from_json(cls, data):
        """
        Reads the wire format from a JSON string or from already decoded
        data. The top-level object must carry an ``extra`` array.
        """
        from fancychat.types import codec

        if isinstance(data, (str, bytes)):
            return codec.loads(data, message_class=cls)
        return codec.message_from_json(data, message_class=cls)

    # Builder -----------------------------------------------------------------

    @property
    def cursor(self):
        """Index of the part that builder methods modify."""
        return len(self.parts) - 1

    def latest(self):
        return self.parts[self.cursor]

    def _changed(self):
        self._dirty = True
        return self

    def set_text(self, content):
        self.latest().text = _text_content(content)
        return self._changed()

    def set_color(self, color):
        if not isinstance(color, ChatColor):
            color = ChatColor.by_name(color)
        if not color.is_color:
            raise InvalidStyleError("%s is not a color" % color.name)
        self.latest().color = color
        return self._changed()

    def add_styles(self, *styles):
        resolved = []
        for style in styles:
            if not isinstance(style, ChatColor):
                style = ChatColor.by_style_name(style)
            if not style.is_format:
                raise InvalidStyleError("%s is not a style" % style.name)
            resolved.append(style)

        latest = self.latest()
        for style in resolved:
            latest.add_style(style)
        return self._changed()

    def on_click(self, name, data):
        latest = self.latest()
        if name is None or data is None:
            name = data = None
        latest.click_action_name = name
        latest.click_action_data = data
        return self._changed()

    def on_hover(self, name, data):
        latest = self.latest()
        if name is None or data is None:
            name = data = None
        else:
            data = to_json_value(data)
        latest.hover_action_name = name
        latest.hover_action_data = data
        return self._changed()

    def link(self, url):
        return self.on_click("open_url", url)

    def file(self, path):
        return self.on_click("open_file", path)

    def suggest(self, command):
        return self.on_click("suggest_command", command)

    def command(self, command):
        return self.on_click("run_command", command)

    def set_insertion(self, text):
        self.latest().insertion = text
        return self._changed()

    def set_translation_args(self, *values):
        """
        Sets the substitutions for a translated part. Each value is a string
        or a message. They are only written out when the part's text is a
        :class:`~fancychat.types.text.Localized` key.
        """
        self.latest().translation_args = [to_json_value(v) for v in values]
        return self._changed()

    def tooltip(self, *lines):
        return self.on_hover("show_text", JsonString("\n".join(lines)))

    def achievement_tooltip(self, name):
        return self.on_hover("show_achievement", JsonString("achievement." + name))

    def formatted_tooltip(self, *messages):
        """
        Shows the given messages, one per line, when the current part is
        hovered. With no arguments the tooltip is removed.
        """
        if not messages:
            return self.on_hover(None, None)

        parts = []
        for i, message in enumerate(messages):
            if i:
                parts.append(MessagePart(Literal("\n")))
            for part in message:
                if part.has_click():
                    raise InvalidArgumentError("The tooltip text cannot have click data.")
                if part.has_hover():
                    raise InvalidArgumentError("The tooltip text cannot have a tooltip.")
                if part.has_text():
                    parts.append(part.copy())

        if not parts:
            raise InvalidArgumentError("The tooltip text is empty.")

        return self.on_hover("show_text", Message.from_parts(parts))

    def then(self, content=None):
        if not self.latest().has_text():
            raise IncompleteSegmentError("previous message part has no text")
        self.parts.append(MessagePart(content))
        return self._changed()

    def apply(self, func, *args):
        func(self, *args)
        return self

    def copy(self):
        return type(self).from_parts(part.copy() for part in self.parts)

    # Output ------------------------------------------------------------------

    @property
    def value(self):
        """The wire format of this message as JSON-compatible data."""
        from fancychat.types import codec

        return codec.message_to_json(self)

    def to_json(self):
        from fancychat.types import codec

        if self._json is None or self._dirty:
            self._json = codec.dumps(self, separators=self.json_separators)
            self._dirty = False
        return self._json

    def to_legacy_string(self):
        """
        Renders the message with legacy formatting codes. Click, hover,
        insertion and translation data are lost.
        """
        return "".join(part.to_legacy_string() for part in self.parts)

    def to_string(self, strip_styles=True):
        """
        Retrieves a plaintext representation, optionally including styles
        encoded using old-school chat codes (U+00A7 plus one character).
        """
        text = self.to_legacy_string()
        if strip_styles:
            text = self.strip_chat_styles(text)
        return text

    @classmethod
    def strip_chat_styles(cls, text):
        return strip_color(text)

    def __iter__(self):
        return iter(self.parts)

    def __len__(self):
        return len(self.parts)

    def __eq__(self, other):
        if not isinstance(other, Message):
            return NotImplemented
        return self.parts == other.parts

    def __lt__(self, other):
        if not isinstance(other, Message):
            return NotImplemented
        return self.to_json() < other.to_json()

    __hash__ = None

    def __str__(self):
        return self.to_string()

    def __repr__(self):
        return "<Message %r>" % str(self)
