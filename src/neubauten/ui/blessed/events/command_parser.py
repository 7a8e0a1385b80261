"""
Vim-style command parser.

Keys arrive one at a time as event dicts (see ``keys.parse_key``). In the
sequence regime printable keys accumulate in ``input_sequence`` and are
matched against ``COMMAND_TABLE``. ``/`` and ``s`` switch to the argument
regime, where every key edits a free-text argument until Enter submits it
as a filter or search.
"""

from enum import Enum
from typing import NamedTuple, Optional

from loguru import logger

from .actions import Action, ActionKind


class ArgumentMode(Enum):
    FILTER = "filter"
    SEARCH = "search"


class ParseStatus(Enum):
    RESOLVED = "resolved"
    INCOMPLETE = "incomplete"  # keep buffering
    NO_MATCH = "no_match"


class ParseResult(NamedTuple):
    status: ParseStatus
    action: Optional[Action] = None


INCOMPLETE = ParseResult(ParseStatus.INCOMPLETE)
NO_MATCH = ParseResult(ParseStatus.NO_MATCH)

# Matched in order; a key string may be a prefix of another
COMMAND_TABLE: tuple[tuple[str, ActionKind], ...] = (
    ("gg", ActionKind.MOVE_TOP),
    ("j", ActionKind.MOVE_DOWN),
    ("k", ActionKind.MOVE_UP),
    ("G", ActionKind.MOVE_BOTTOM),
    ("q", ActionKind.QUEUE_TRACK),
    ("e", ActionKind.QUIT),
    (" ", ActionKind.TOGGLE_PLAYBACK),
    (">", ActionKind.PLAY_NEXT_TRACK),
)

ARGUMENT_TRIGGERS: dict[str, ArgumentMode] = {
    "/": ArgumentMode.FILTER,
    "s": ArgumentMode.SEARCH,
}

ARGUMENT_ACTIONS: dict[ArgumentMode, ActionKind] = {
    ArgumentMode.FILTER: ActionKind.FILTER_LIST,
    ArgumentMode.SEARCH: ActionKind.SEARCH_TRACK,
}

# Outside argument mode; a pending sequence is dropped
ARROW_ACTIONS: dict[str, ActionKind] = {
    "arrow_up": ActionKind.MOVE_UP,
    "arrow_down": ActionKind.MOVE_DOWN,
}


def resolve(kind: ActionKind, argument: Optional[str] = None) -> ParseResult:
    return ParseResult(ParseStatus.RESOLVED, Action(kind, argument))


class CommandParser:
    """Turns key events into actions; holds the pending sequence and argument."""

    def __init__(
        self, table: tuple[tuple[str, ActionKind], ...] = COMMAND_TABLE
    ) -> None:
        self._table = table
        self._input_sequence = ""
        self._argument = ""
        self._argument_mode: Optional[ArgumentMode] = None

    @property
    def input_sequence(self) -> str:
        return self._input_sequence

    @property
    def argument(self) -> str:
        return self._argument

    @property
    def argument_mode(self) -> Optional[ArgumentMode]:
        return self._argument_mode

    def reset(self) -> None:
        self._input_sequence = ""
        self._argument = ""
        self._argument_mode = None

    def handle_input(self, event: dict) -> ParseResult:
        """
        Consume one key event.

        Args:
            event: Event dict from ``parse_key``

        Returns:
            RESOLVED with an action, INCOMPLETE while more keys are needed
            (including argument typing), or NO_MATCH when the key was absorbed
        """
        if self._argument_mode is not None:
            return self._handle_argument(event)
        return self._handle_sequence(event)

    def _handle_argument(self, event: dict) -> ParseResult:
        event_type = event["type"]

        if event_type == "enter":
            kind = ARGUMENT_ACTIONS[self._argument_mode]
            argument = self._argument
            self.reset()
            return resolve(kind, argument)

        if event_type == "escape":
            self.reset()
            return NO_MATCH

        if event_type == "backspace":
            if self._argument:
                self._argument = self._argument[:-1]
                return INCOMPLETE
            self._argument_mode = None
            return NO_MATCH

        if event_type == "char":
            self._argument += event["char"]

        return INCOMPLETE

    def _handle_sequence(self, event: dict) -> ParseResult:
        event_type = event["type"]

        if event_type == "enter":
            self._input_sequence = ""
            return resolve(ActionKind.SELECT)

        if event_type == "escape":
            if not self._input_sequence:
                return resolve(ActionKind.BACK)
            self._input_sequence = ""
            return NO_MATCH

        if event_type in ARROW_ACTIONS:
            self._input_sequence = ""
            return resolve(ARROW_ACTIONS[event_type])

        if event_type != "char":
            return NO_MATCH

        char = event["char"]
        mode = ARGUMENT_TRIGGERS.get(char)
        if mode is not None:
            self._input_sequence = ""
            self._argument = ""
            self._argument_mode = mode
            return INCOMPLETE

        self._input_sequence += char
        return self._match_sequence()

    def _match_sequence(self) -> ParseResult:
        buffer = self._input_sequence
        candidates = [
            (keys, kind) for keys, kind in self._table if keys.startswith(buffer)
        ]

        for keys, kind in candidates:
            if keys == buffer:
                self._input_sequence = ""
                return resolve(kind)

        if candidates:
            return INCOMPLETE

        logger.debug(f"No command for key sequence {buffer!r}")
        self._input_sequence = ""
        return NO_MATCH
