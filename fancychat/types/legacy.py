import re
from twisted import logger as log

from fancychat.types.chat import Message, MessagePart
from fancychat.types.color import COLOR_CHAR, ChatColor
from fancychat.types.text import Literal

logger = log.Logger(namespace=__name__)


class LegacyParser(object):
    """
    Converts text using legacy formatting codes into a :class:`Message`.

    A colour code starts a fresh part that drops any styles set before it;
    a format code adds to the styles of the part being built. Anything that
    looks like a URL becomes its own part that opens the URL when clicked.
    """

    color_char = COLOR_CHAR

    #: Matched against the text from the current position to the next space.
    url_pattern = re.compile(
        r"^(?:(https?)://)?([-\w_.]{2,}\.[a-z]{2,4})(/\S*)?$", re.ASCII
    )
    url_action = "open_url"
    default_url_scheme = "http://"

    #: The reset code is treated as a switch to this colour.
    reset_color = ChatColor.WHITE

    def __init__(self, message_class=Message):
        self.message_class = message_class

    def parse(self, text):
        self.parts = []
        self.buffer = []
        # Carries colour and styles over to the next part
        self.template = MessagePart()

        i = 0
        while i < len(text):
            char = text[i]
            if char == self.color_char:
                i += 1
                if i < len(text):
                    self.handle_code(text[i])
                i += 1
                continue

            end = text.find(" ", i)
            if end == -1:
                end = len(text)
            url = text[i:end]
            if self.url_pattern.fullmatch(url):
                self.handle_url(url)
                i = end
                continue

            self.buffer.append(char)
            i += 1

        self.flush()

        # The client crashes on an empty component list
        if not self.parts:
            self.parts.append(MessagePart(Literal("")))

        return self.message_class.from_parts(self.parts)

    def flush(self):
        """Finishes the buffered text as a part and continues its style."""
        if not self.buffer:
            return

        part = self.template
        self.template = part.copy()
        part.text = Literal("".join(self.buffer))
        self.parts.append(part)
        self.buffer = []

    def handle_code(self, code):
        style = ChatColor.by_char(code)
        if style is None:
            logger.debug("Skipping unknown format code {code!r}", code=code)
            return

        self.flush()

        if style.is_format:
            self.template.add_style(style)
        else:
            if style is ChatColor.RESET:
                style = self.reset_color
            self.template = MessagePart()
            self.template.color = style

    def handle_url(self, url):
        self.flush()

        part = self.template.copy()
        part.text = Literal(url)
        part.click_action_name = self.url_action
        if url.startswith("http"):
            part.click_action_data = url
        else:
            part.click_action_data = self.default_url_scheme + url
        self.parts.append(part)
