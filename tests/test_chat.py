import pytest

from fancychat.errors import (
    IncompleteSegmentError,
    InvalidArgumentError,
    InvalidStyleError,
    UnknownColorError,
    UnknownStyleKeyError,
)
from fancychat.types.chat import Message, MessagePart
from fancychat.types.color import ChatColor
from fancychat.types.text import Literal, Localized, Selector
from fancychat.types.values import JsonString, NestedMessage


class TestBuilder:
    def test_new_message_has_one_part(self):
        assert len(Message()) == 1
        assert not Message().latest().has_text()
        assert Message("hi").latest().text == Literal("hi")

    def test_chaining_acts_on_latest_part(self):
        message = (
            Message("Hello ")
            .set_color(ChatColor.GREEN)
            .then("world")
            .set_color("red")
            .add_styles(ChatColor.BOLD, "italic")
            .set_insertion("/msg world")
        )
        first, second = message
        assert first.color is ChatColor.GREEN
        assert first.styles == []
        assert second.color is ChatColor.RED
        assert set(second.styles) == {ChatColor.BOLD, ChatColor.ITALIC}
        assert second.insertion == "/msg world"
        assert message.cursor == 1

    def test_set_text_accepts_text_content(self):
        message = Message("x").set_text(Selector("@p"))
        assert message.latest().text == Selector("@p")

    @pytest.mark.parametrize("style", [ChatColor.BOLD, ChatColor.RESET])
    def test_set_color_rejects_non_colors(self, style):
        with pytest.raises(InvalidStyleError):
            Message("x").set_color(style)

    def test_set_color_by_unknown_name(self):
        with pytest.raises(UnknownColorError):
            Message("x").set_color("purple")

    @pytest.mark.parametrize("style", [ChatColor.RED, ChatColor.RESET])
    def test_add_styles_rejects_non_formats(self, style):
        message = Message("x")
        with pytest.raises(InvalidStyleError):
            message.add_styles(ChatColor.BOLD, style)
        assert message.latest().styles == []

    def test_add_styles_by_unknown_name(self):
        with pytest.raises(UnknownStyleKeyError):
            Message("x").add_styles("shiny")

    def test_add_styles_ignores_duplicates(self):
        message = Message("x").add_styles(ChatColor.BOLD).add_styles(ChatColor.BOLD)
        assert message.latest().styles == [ChatColor.BOLD]

    def test_then_requires_text(self):
        with pytest.raises(IncompleteSegmentError):
            Message().then("x")
        message = Message("a").then()
        with pytest.raises(IncompleteSegmentError):
            message.then()

    def test_click_shortcuts(self):
        part = Message("x").command("/spawn").latest()
        assert (part.click_action_name, part.click_action_data) == ("run_command", "/spawn")
        part = Message("x").suggest("/tell ").latest()
        assert part.click_action_name == "suggest_command"
        part = Message("x").link("https://example.com").latest()
        assert part.click_action_name == "open_url"
        part = Message("x").file("/tmp/a.txt").latest()
        assert part.click_action_name == "open_file"

    def test_on_click_none_clears(self):
        part = Message("x").link("https://example.com").on_click(None, "ignored").latest()
        assert part.click_action_name is None
        assert part.click_action_data is None

    def test_tooltip_joins_lines(self):
        part = Message("x").tooltip("one", "two").latest()
        assert part.hover_action_name == "show_text"
        assert part.hover_action_data == JsonString("one\ntwo")

    def test_achievement_tooltip(self):
        part = Message("x").achievement_tooltip("mineWood").latest()
        assert part.hover_action_name == "show_achievement"
        assert part.hover_action_data == JsonString("achievement.mineWood")

    def test_apply(self):
        def shout(message, color):
            message.set_color(color).add_styles(ChatColor.BOLD)

        message = Message("hey").apply(shout, ChatColor.RED)
        assert message.latest().color is ChatColor.RED
        assert message.latest().styles == [ChatColor.BOLD]

    def test_translation_args(self):
        inner = Message("Steve")
        part = Message(Localized("chat.type.text")).set_translation_args("a", inner).latest()
        assert part.translation_args == [JsonString("a"), NestedMessage(inner)]


class TestFormattedTooltip:
    def test_concatenates_lines(self):
        first = Message("Line ").then("one").set_color(ChatColor.GOLD)
        second = Message("Line two")
        part = Message("x").formatted_tooltip(first, second).latest()

        assert part.hover_action_name == "show_text"
        tooltip = part.hover_action_data.message
        assert [p.text.readable for p in tooltip] == ["Line ", "one", "\n", "Line two"]
        assert tooltip.parts[1].color is ChatColor.GOLD

    def test_parts_are_copied(self):
        line = Message("a")
        part = Message("x").formatted_tooltip(line).latest()
        line.set_color(ChatColor.RED)
        assert part.hover_action_data.message.latest().color is ChatColor.WHITE

    def test_no_arguments_clears_hover(self):
        message = Message("x").tooltip("hover me")
        message.formatted_tooltip()
        assert message.latest().hover_action_name is None
        assert "hoverEvent" not in message.value

    def test_rejects_click_actions(self):
        with pytest.raises(InvalidArgumentError):
            Message("x").formatted_tooltip(Message("a").command("/kill"), Message("b"))

    def test_rejects_nested_tooltips(self):
        with pytest.raises(InvalidArgumentError):
            Message("x").formatted_tooltip(Message("a").tooltip("nested"))

    def test_rejects_textless_tooltip(self):
        with pytest.raises(InvalidArgumentError):
            Message("x").formatted_tooltip(Message())


class TestCopy:
    def test_copy_is_independent(self):
        original = Message("a").set_color(ChatColor.RED).add_styles(ChatColor.BOLD)
        clone = original.copy()
        assert clone == original

        clone.set_color(ChatColor.BLUE).add_styles(ChatColor.ITALIC).then("b")
        assert len(original) == 1
        assert original.latest().color is ChatColor.RED
        assert original.latest().styles == [ChatColor.BOLD]

        original.set_text("changed")
        assert clone.parts[0].text == Literal("a")

    def test_copy_clones_nested_messages(self):
        original = Message("a").formatted_tooltip(Message("tip"))
        clone = original.copy()
        clone.latest().hover_action_data.message.set_text("other")
        assert original.latest().hover_action_data.message.latest().text == Literal("tip")


class TestLegacyOutput:
    def test_to_legacy_string(self):
        message = (
            Message("Hello ")
            .set_color(ChatColor.GREEN)
            .then("world")
            .add_styles(ChatColor.BOLD, ChatColor.ITALIC)
            .link("https://example.com")
        )
        assert message.to_legacy_string() == "§aHello §f§l§oworld"

    def test_to_string(self):
        message = Message("Hello ").set_color(ChatColor.GREEN).then(Localized("item.apple"))
        assert message.to_string() == "Hello item.apple"
        assert message.to_string(strip_styles=False) == "§aHello §fitem.apple"
        assert str(message) == "Hello item.apple"
        assert repr(message) == "<Message 'Hello item.apple'>"


class TestEquality:
    def test_style_order_is_ignored(self):
        a = MessagePart(Literal("x"))
        a.styles = [ChatColor.BOLD, ChatColor.ITALIC]
        b = MessagePart(Literal("x"))
        b.styles = [ChatColor.ITALIC, ChatColor.BOLD]
        assert a == b

    def test_messages_differ(self):
        assert Message("a") != Message("b")
        assert Message("a") != Message("a").set_color(ChatColor.RED)

    def test_ordering_follows_json(self):
        assert sorted([Message("b"), Message("a")]) == [Message("a"), Message("b")]

    def test_from_parts_never_empty(self):
        message = Message.from_parts([])
        assert len(message) == 1
        assert message.latest().text == Literal("")


def test_from_string():
    from fancychat import Message as PublicMessage

    message = PublicMessage.from_string("hello")
    assert message == Message("hello")
    assert message.to_json() == '{"text":"hello","color":"white"}'


def test_ordering_with_other_types():
    with pytest.raises(TypeError):
        Message("a") < "a"
    assert Message("a").__lt__("a") is NotImplemented
