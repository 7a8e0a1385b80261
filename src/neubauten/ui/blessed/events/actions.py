"""Resolved user intents produced by the command parser."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ActionKind(Enum):
    SELECT = "select"
    PLAY_NEXT_TRACK = "play_next_track"
    QUEUE_TRACK = "queue_track"
    TOGGLE_PLAYBACK = "toggle_playback"
    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    MOVE_TOP = "move_top"
    MOVE_BOTTOM = "move_bottom"
    BACK = "back"
    QUIT = "quit"
    FILTER_LIST = "filter_list"
    SEARCH_TRACK = "search_track"
    NOOP = "noop"


@dataclass(frozen=True)
class Action:
    """An action kind plus its text argument (filter and search only)."""

    kind: ActionKind
    argument: Optional[str] = None

    def __str__(self) -> str:
        if self.argument is None:
            return self.kind.value
        return f"{self.kind.value}({self.argument!r})"


NOOP = Action(ActionKind.NOOP)
