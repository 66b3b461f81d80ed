import math
from typing import Any, Dict

PLAYED = "="
UNPLAYED = "-"
WINDOW = "!"
HEAD = "|"


def render_track(view: Dict[str, Any], width: int) -> str:
    """
    Scrub track as text: violation windows overlaid on progress.
    """
    cells = [UNPLAYED] * width
    filled = int(math.floor(view["progress"] / 100 * width))

    for i in range(min(filled, width)):
        cells[i] = PLAYED

    for m in view["markers"]:
        start = int(math.floor(m["left"] / 100 * width))
        end = int(math.ceil((m["left"] + m["width"]) / 100 * width))
        for i in range(start, max(end, start + 1)):
            if 0 <= i < width:
                cells[i] = WINDOW

    head = min(filled, width - 1)
    cells[head] = HEAD
    return "[" + "".join(cells) + "]"


def render_player(view: Dict[str, Any], width: int = 60) -> str:
    state = "playing" if view["controls"]["playing"] else "paused"
    if not view["controls"]["play_enabled"]:
        state = "loading"
    if view["error"]:
        state = f"failed to load: {view['error']}"

    sound = "muted" if view["controls"]["muted"] else "sound on"

    lines = [
        render_track(view, width),
        f"{view['clock']}  {state}  {sound}",
    ]

    if view["bookmarks"]:
        lines.append("Violation Bookmarks:")
        for b in view["bookmarks"]:
            flag = ">" if b["active"] else " "
            lines.append(
                f" {flag} [{b['display_range']}] {b['description']} ({b['category']})"
            )

    return "\n".join(lines)
