from __future__ import annotations

from flagkit.messages import (
    PLAIN_STYLE,
    RICH_STYLE,
    MessageStyle,
    comma_list_and,
    compose_active_flags_message,
    compose_unknown_flag_message,
    format_flag_line,
    plain_link,
    rich_link,
)
from flagkit.models import Flag, UnknownFlag


def test_comma_list_and():
    assert comma_list_and([]) == ""
    assert comma_list_and(["A"]) == "A"
    assert comma_list_and(["A", "B"]) == "A and B"
    assert comma_list_and(["A", "B", "C"]) == "A, B and C"


def test_links():
    assert plain_link("Umbrella Issue", "https://example.com/x") == "Umbrella Issue (https://example.com/x)"
    assert rich_link("Umbrella Issue", "https://example.com/x") == "[link=https://example.com/x]Umbrella Issue[/link]"


def test_unknown_message_with_suggestions():
    unknown = [
        UnknownFlag(name="FAST_DEX", did_you_mean="FAST_DEV", distance=1),
        UnknownFlag(name="TOTALLY_UNRELATED", distance=12),
        UnknownFlag(name="DEV_SRR", did_you_mean="DEV_SSR", distance=2),
    ]
    msg = compose_unknown_flag_message(unknown, "flagkit.json")
    assert msg == (
        "The following flag(s) found in your flagkit.json are not known: FAST_DEX, TOTALLY_UNRELATED and DEV_SRR"
        "\n\nDid you mean: FAST_DEV and DEV_SSR?\n"
    )


def test_unknown_message_empty():
    assert compose_unknown_flag_message([], "flagkit.json") == ""


def test_active_message_empty():
    assert compose_active_flags_message([]) == ""


def test_flag_line_uses_injected_style():
    flag = Flag(
        name="EXP",
        description="Try it",
        experimental=True,
        umbrella_issue_url="https://example.com/exp",
    )
    style = MessageStyle(link=lambda text, url: f"<{text}|{url}>", badge=lambda label: f"*{label}*")
    assert format_flag_line(flag, style) == "- EXP · *EXPERIMENTAL* · (<Umbrella Issue|https://example.com/exp>) · Try it"
    assert format_flag_line(flag, PLAIN_STYLE) == (
        "- EXP · EXPERIMENTAL · (Umbrella Issue (https://example.com/exp)) · Try it"
    )


def test_rich_style_escapes_text_but_not_markup():
    flag = Flag(name="F", description="uses [brackets]", experimental=True)
    line = format_flag_line(flag, RICH_STYLE)
    assert "[bold white on red]EXPERIMENTAL[/]" in line
    assert "\\[brackets]" in line
