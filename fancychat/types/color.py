import enum
import re
from types import MappingProxyType

from fancychat.errors import UnknownColorError, UnknownStyleKeyError

#: The escape marker that starts a legacy formatting code.
COLOR_CHAR = "§"

_STRIP_COLOR_PATTERN = re.compile("(?i)" + COLOR_CHAR + "[0-9a-fk-or]")

_FORMAT_CODES = frozenset("klmno")

# Wire names that differ from the lowercased member name
_STYLE_NAME_OVERRIDES = {"MAGIC": "obfuscated", "UNDERLINE": "underlined"}


class ChatColor(enum.Enum):
    """
    Every legacy formatting code. Members are either a colour (mutually
    exclusive), a format (combinable), or :attr:`RESET`, which is neither.
    The member value is the legacy code character.
    """

    BLACK = "0"
    DARK_BLUE = "1"
    DARK_GREEN = "2"
    DARK_AQUA = "3"
    DARK_RED = "4"
    DARK_PURPLE = "5"
    GOLD = "6"
    GRAY = "7"
    DARK_GRAY = "8"
    BLUE = "9"
    GREEN = "a"
    AQUA = "b"
    RED = "c"
    LIGHT_PURPLE = "d"
    YELLOW = "e"
    WHITE = "f"
    MAGIC = "k"
    BOLD = "l"
    STRIKETHROUGH = "m"
    UNDERLINE = "n"
    ITALIC = "o"
    RESET = "r"

    @property
    def char(self):
        return self.value

    @property
    def is_format(self):
        return self.value in _FORMAT_CODES

    @property
    def is_color(self):
        return not self.is_format and self is not ChatColor.RESET

    @property
    def wire_name(self):
        return _STYLE_NAME_OVERRIDES.get(self.name, self.name.lower())

    def __str__(self):
        return COLOR_CHAR + self.value

    @classmethod
    def by_char(cls, char):
        """Returns the member for a legacy code character, or ``None``."""
        try:
            return cls(char.lower())
        except ValueError:
            return None

    @classmethod
    def by_name(cls, name):
        """Looks up a colour by its (case-insensitive) name."""
        color = cls.__members__.get(str(name).upper())
        if color is None or not color.is_color:
            raise UnknownColorError("Unknown color: %r" % name)
        return color

    @classmethod
    def by_style_name(cls, name):
        """Looks up a format by its wire name, e.g. ``"underlined"``."""
        try:
            return NAMES_TO_STYLES[name]
        except KeyError:
            raise UnknownStyleKeyError("Unknown style: %r" % name) from None


STYLES_TO_NAMES = MappingProxyType(
    {style: style.wire_name for style in ChatColor if style.is_format}
)
NAMES_TO_STYLES = MappingProxyType({v: k for k, v in STYLES_TO_NAMES.items()})


def strip_color(text):
    """Removes every legacy formatting code from *text*."""
    if text is None:
        return None
    return _STRIP_COLOR_PATTERN.sub("", text)
