"""Command that shows off each kind of notification."""

from __future__ import annotations

import sys
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from .alerter import Alerter
from .errors import AlerterError

ALERT_ICON = (
    "/System/Library/CoreServices/CoreTypes.bundle/Contents/Resources/AlertNoteIcon.icns"
)
SHOWCASE_GROUP = "showcase-group"


def _demos() -> Dict[str, Tuple[str, Callable[[], Alerter]]]:
    return {
        "basic": (
            "Basic notification with title and message",
            lambda: Alerter("This is a basic notification").title("Basic").timeout(5),
        ),
        "sound": (
            "Notification with sound",
            lambda: Alerter("This notification has sound")
            .title("Sound").sound("default").timeout(5),
        ),
        "actions": (
            "Notification with action buttons",
            lambda: Alerter("Choose an option")
            .title("Actions").actions(["Yes", "No"]).close_label("Maybe"),
        ),
        "dropdown": (
            "Notification with dropdown menu",
            lambda: Alerter("Select from the dropdown")
            .title("Dropdown").dropdown_label("Pick one")
            .actions(["Option A", "Option B", "Option C"]).timeout(5),
        ),
        "reply": (
            "Notification with reply field",
            lambda: Alerter("Send a reply").title("Reply").reply("Type here...").timeout(5),
        ),
        "icon": (
            "Notification with custom app icon",
            lambda: Alerter("This notification has a custom icon")
            .title("Icon").app_icon(ALERT_ICON).timeout(5),
        ),
        "content-image": (
            "Notification with content image",
            lambda: Alerter("This notification has a content image")
            .title("Content Image").content_image(ALERT_ICON).timeout(5),
        ),
        "subtitle": (
            "Notification with subtitle",
            lambda: Alerter("This notification has a subtitle")
            .title("Subtitle").subtitle("This is a subtitle").timeout(5),
        ),
        "group": (
            "Notification with group identifier",
            lambda: Alerter("This notification belongs to a group")
            .title("Group").group(SHOWCASE_GROUP).timeout(5),
        ),
        "sender": (
            "Notification with custom sender",
            lambda: Alerter("This notification has a custom sender")
            .title("Sender").sender("com.apple.Safari").timeout(5),
        ),
        "json": (
            "Notification with JSON output",
            lambda: Alerter("This notification returns JSON")
            .title("JSON").json(True).timeout(5),
        ),
        "close-label": (
            "Notification with custom close label",
            lambda: Alerter("This notification has a custom close label")
            .title("Close Label").close_label("Dismiss").timeout(5),
        ),
        "ignore-dnd": (
            "Notification that ignores Do Not Disturb",
            lambda: Alerter("This notification ignores Do Not Disturb")
            .title("Ignore DND").ignore_dnd(True).timeout(5),
        ),
    }


def _usage(demos: Dict[str, Tuple[str, Callable[[], Alerter]]]) -> str:
    entries: List[Tuple[str, str]] = [(name, text) for name, (text, _) in demos.items()]
    entries.append(("remove", "Remove notifications for a group"))
    lines = ["Usage: showcase <type>", "", "Available notification types:"]
    lines.extend(f"  {name:<15}{text}" for name, text in entries)
    return "\n".join(lines)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Send the notification named by the first argument and print the result."""
    args = list(sys.argv[1:] if argv is None else argv)
    kind = args[0] if args else ""
    demos = _demos()

    if kind == "remove":
        try:
            Alerter.remove(SHOWCASE_GROUP)
        except AlerterError as exc:
            print(f"Remove error: {exc}", file=sys.stderr)
        else:
            print(f"Removed notifications for group '{SHOWCASE_GROUP}'")
        return 0

    if kind not in demos:
        print(_usage(demos), file=sys.stderr)
        return 1

    _, build = demos[kind]
    try:
        response = build().send()
    except AlerterError as exc:
        print(f"Notification error: {exc}", file=sys.stderr)
    else:
        print(repr(response))
    return 0


if __name__ == "__main__":
    sys.exit(main())