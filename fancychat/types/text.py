"""
The textual payload of a message part. Each kind serializes under its own
JSON key: plain text, a translation key, a scoreboard score or an entity
selector.
"""

from dataclasses import dataclass

from fancychat.errors import InvalidArgumentError


def _check(name, value, allow_empty=False):
    if not isinstance(value, str):
        raise InvalidArgumentError("%s must be a string, not %r" % (name, value))
    if not value and not allow_empty:
        raise InvalidArgumentError("%s must be specified" % name)


@dataclass(frozen=True)
class Literal:
    text: str

    key = "text"

    def __post_init__(self):
        _check("text", self.text, allow_empty=True)

    @property
    def readable(self):
        return self.text

    def __str__(self):
        return self.readable


@dataclass(frozen=True)
class Localized:
    translate_key: str

    key = "translate"

    def __post_init__(self):
        _check("translate_key", self.translate_key)

    @property
    def readable(self):
        return self.translate_key

    def __str__(self):
        return self.readable


@dataclass(frozen=True)
class ScoreboardScore:
    player: str
    objective: str

    key = "score"

    def __post_init__(self):
        _check("player", self.player)
        _check("objective", self.objective)

    @property
    def readable(self):
        # The client substitutes the score; all we can show is the key
        return self.key

    def __str__(self):
        return self.readable


@dataclass(frozen=True)
class Selector:
    selector: str

    key = "selector"

    def __post_init__(self):
        _check("selector", self.selector)

    @property
    def readable(self):
        return self.selector

    def __str__(self):
        return self.readable


TEXT_TYPES = (Literal, Localized, ScoreboardScore, Selector)
TEXT_KEYS = frozenset(t.key for t in TEXT_TYPES)


def is_text_key(key):
    return key in TEXT_KEYS


def raw_text(text):
    return Literal(text)


def localized_text(translate_key):
    return Localized(translate_key)


def objective_score(objective, player="*"):
    """
    A score on *objective*. The default player ``*`` shows the score of
    whoever is looking at the message.
    """
    return ScoreboardScore(player, objective)


def selector(value):
    return Selector(value)
