"""In-editor log console with a tiny command interpreter."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List

_MAX_MESSAGE_LENGTH = 1023

_HELP_LINES = (
    "Available commands:",
    " - clear: Clears the console",
    " - help: Shows available commands",
    " - stat fps: Toggle FPS display",
    " - stat memory: Toggle Memory display",
    " - stat none: Hide all stat overlays",
)


class LogLevel(Enum):
    """Severity of a console message."""

    DISPLAY = auto()
    WARNING = auto()
    ERROR = auto()


@dataclass(frozen=True)
class LogEntry:
    """One line of console output."""

    level: LogLevel
    message: str


@dataclass
class StatOverlay:
    """Which statistics the overlay shows."""

    show_fps: bool = False
    show_memory: bool = False
    show_render: bool = False

    def toggle_stat(self, command: str) -> None:
        """Apply a ``stat ...`` command; unknown stats are ignored."""
        if command == "stat fps":
            self.show_fps = True
            self.show_render = True
        elif command == "stat memory":
            self.show_memory = True
            self.show_render = True
        elif command == "stat none":
            self.show_fps = False
            self.show_memory = False
            self.show_render = False


def _passes_filter(text: str, text_filter: str) -> bool:
    """Comma-separated, case-insensitive filter; a leading '-' excludes."""
    haystack = text.lower()
    positive_count = 0
    for raw in text_filter.split(","):
        term = raw.strip(" ")
        if not term:
            continue
        if term.startswith("-"):
            needle = term[1:].lower()
            if needle and needle in haystack:
                return False
        else:
            positive_count += 1
            if term.lower() in haystack:
                return True
    return positive_count == 0


@dataclass
class Console:
    """A scrollable log with level toggles, history and commands."""

    items: List[LogEntry] = field(default_factory=list)
    history: List[str] = field(default_factory=list)
    history_pos: int = -1
    scroll_to_bottom: bool = False
    show_display: bool = True
    show_warning: bool = True
    show_error: bool = True
    is_open: bool = True
    overlay: StatOverlay = field(default_factory=StatOverlay)

    def clear(self) -> None:
        """Drop every log entry."""
        self.items.clear()

    def add_log(self, level: LogLevel, fmt: str, *args: object) -> None:
        """Append a printf-style formatted message, capped at 1023 characters."""
        message = fmt % args if args else fmt
        self.items.append(LogEntry(level, message[:_MAX_MESSAGE_LENGTH]))
        self.scroll_to_bottom = True

    def execute_command(self, command: str) -> None:
        """Run one console command, logging what happens."""
        self.add_log(LogLevel.DISPLAY, "Executing command: %s", command)
        if command == "clear":
            self.clear()
        elif command == "help":
            for line in _HELP_LINES:
                self.add_log(LogLevel.DISPLAY, line)
        elif command.startswith("stat "):
            self.overlay.toggle_stat(command)
        else:
            self.add_log(LogLevel.ERROR, "Unknown command: %s", command)

    def submit(self, text: str) -> None:
        """Handle a line entered in the input box; empty input does nothing."""
        if not text:
            return
        self.add_log(LogLevel.DISPLAY, ">> %s", text)
        self.execute_command(text)
        self.history.append(text)
        self.history_pos = -1
        self.scroll_to_bottom = True

    def toggle(self) -> None:
        """Show the console if hidden, hide it if shown."""
        self.is_open = not self.is_open

    def visible_entries(self, text_filter: str = "") -> List[LogEntry]:
        """Entries that pass the text filter and the level toggles."""
        shown = {
            LogLevel.DISPLAY: self.show_display,
            LogLevel.WARNING: self.show_warning,
            LogLevel.ERROR: self.show_error,
        }
        return [
            entry
            for entry in self.items
            if _passes_filter(entry.message, text_filter) and shown[entry.level]
        ]