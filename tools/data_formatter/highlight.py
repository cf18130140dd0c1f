"""Terminal highlighting for emitted documents."""

from dataclasses import dataclass, field
from enum import Enum
from typing import IO, Iterable, NamedTuple, Optional

from rich.console import Console
from rich.style import Style


class Role(str, Enum):
    """Highlighting roles of emitted text."""

    KEY = "key"
    STRING = "string"
    HEADER = "header"
    ERROR = "error"


class Span(NamedTuple):
    """A piece of emitted text and the role it is highlighted with."""

    text: str
    role: Optional[Role] = None


@dataclass(frozen=True)
class Palette:
    """Styles applied to each role."""

    key: Style = field(default_factory=lambda: Style(color="blue"))
    string: Style = field(default_factory=lambda: Style(color="green"))
    header: Style = field(default_factory=lambda: Style(color="blue", bold=True))
    error: Style = field(default_factory=lambda: Style(color="red", bold=True))

    def style_for(self, role: Role) -> Style:
        """Get the style of a role."""
        return getattr(self, role.value)


DEFAULT_PALETTE = Palette()


def to_text(spans: Iterable[Span]) -> str:
    """Join spans into plain text."""
    return "".join(span.text for span in spans)


class StyledSink:
    """
    Write spans to a text stream, highlighted when the stream is a terminal.

    Styling never outlives a single write: every styled span is followed by
    a reset sequence.
    """

    def __init__(
        self,
        stream: IO[str],
        palette: Palette = DEFAULT_PALETTE,
        enabled: Optional[bool] = None,
    ):
        """
        Initialize the sink.

        Args:
            stream: Destination text stream
            palette: Styles per role
            enabled: Force highlighting on or off (auto-detect if None)
        """
        self.stream = stream
        self.palette = palette
        if enabled is None:
            console = Console(file=stream)
            enabled = console.is_terminal and not console.no_color
        self.enabled = enabled

    def write(self, text: str) -> None:
        """Write unstyled text."""
        self.stream.write(text)

    def write_styled(self, role: Optional[Role], text: str) -> None:
        """Write text with the style of a role."""
        if self.enabled and role is not None:
            text = self.palette.style_for(role).render(text)
        self.stream.write(text)

    def write_spans(self, spans: Iterable[Span]) -> None:
        """Write emitted spans."""
        for span in spans:
            self.write_styled(span.role, span.text)

    def write_error(self, message: str) -> None:
        """Write an ``error: message`` line."""
        self.write_styled(Role.ERROR, "error")
        self.write(f": {message}\n")
