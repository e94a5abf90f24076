"""Human-readable summaries of a flag resolution.

Presentation primitives (link rendering, the EXPERIMENTAL badge, markup
escaping) are bundled in a `MessageStyle` so callers can pick plain text
for logs and tests, or rich console markup for an interactive terminal.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, List, Sequence

from rich.markup import escape

from .models import Flag, UnknownFlag

LinkRenderer = Callable[[str, str], str]
BadgeRenderer = Callable[[str], str]

SEPARATOR = " · "
ACTIVE_HEADER = "The following flags are active:"
EXPERIMENTAL_LABEL = "EXPERIMENTAL"
UMBRELLA_ISSUE_LABEL = "Umbrella Issue"


def plain_link(text: str, url: str) -> str:
    return f"{text} ({url})"


def rich_link(text: str, url: str) -> str:
    return f"[link={url}]{text}[/link]"


def plain_badge(label: str) -> str:
    return label


def rich_badge(label: str) -> str:
    return f"[bold white on red]{label}[/]"


def _identity(text: str) -> str:
    return text


@dataclass(frozen=True)
class MessageStyle:
    link: LinkRenderer = plain_link
    badge: BadgeRenderer = plain_badge
    escape: Callable[[str], str] = _identity


PLAIN_STYLE = MessageStyle()
RICH_STYLE = MessageStyle(link=rich_link, badge=rich_badge, escape=escape)


def comma_list_and(items: Iterable[str]) -> str:
    """Join items as 'A', 'A and B', 'A, B and C'."""
    parts: List[str] = list(items)
    if not parts:
        return ""
    if len(parts) == 1:
        return parts[0]
    return f"{', '.join(parts[:-1])} and {parts[-1]}"


def compose_unknown_flag_message(
    unknown: Sequence[UnknownFlag],
    config_name: str,
    style: MessageStyle = PLAIN_STYLE,
) -> str:
    if not unknown:
        return ""

    names = comma_list_and(style.escape(u.name) for u in unknown)
    message = f"The following flag(s) found in your {style.escape(config_name)} are not known: {names}"

    suggestions = [style.escape(u.did_you_mean) for u in unknown if u.did_you_mean]
    if suggestions:
        message += f"\n\nDid you mean: {comma_list_and(suggestions)}?\n"
    return message


def format_flag_line(flag: Flag, style: MessageStyle = PLAIN_STYLE) -> str:
    line = f"- {style.escape(flag.name)}"
    if flag.experimental:
        line += SEPARATOR + style.badge(EXPERIMENTAL_LABEL)
    if flag.umbrella_issue_url:
        line += f"{SEPARATOR}({style.link(UMBRELLA_ISSUE_LABEL, flag.umbrella_issue_url)})"
    line += SEPARATOR + style.escape(flag.description)
    return line


def compose_active_flags_message(enabled: Sequence[Flag], style: MessageStyle = PLAIN_STYLE) -> str:
    if not enabled:
        return ""

    message = ACTIVE_HEADER
    for flag in enabled:
        message += "\n" + format_flag_line(flag, style)
    return message + "\n"
