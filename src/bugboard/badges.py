"""Display styles for priority and status badges."""

from dataclasses import dataclass

FALLBACK_STYLE = "default"

PRIORITY_STYLES: dict[str, str] = {
    "Critical": "red",
    "High": "orange",
    "Medium": "yellow",
    "Low": "green",
}

STATUS_STYLES: dict[str, str] = {
    "Open": "blue",
    "In Progress": "purple",
    "Testing": "indigo",
    "Resolved": "green",
    "Closed": "gray",
}

# 256-colour terminal codes for each style
ANSI_CODES: dict[str, str] = {
    "red": "\x1b[38;5;196m",
    "orange": "\x1b[38;5;208m",
    "yellow": "\x1b[38;5;220m",
    "green": "\x1b[38;5;40m",
    "blue": "\x1b[38;5;39m",
    "purple": "\x1b[38;5;135m",
    "indigo": "\x1b[38;5;63m",
    "gray": "\x1b[38;5;245m",
    "default": "\x1b[38;5;250m",
}
ANSI_RESET = "\x1b[0m"


@dataclass(frozen=True)
class Badge:
    """A labelled, styled marker for a field value."""

    label: str
    style: str

    @property
    def is_fallback(self) -> bool:
        return self.style == FALLBACK_STYLE

    def render(self, color: bool = False) -> str:
        text = f"[{self.label}]"
        if not color:
            return text
        return f"{ANSI_CODES.get(self.style, ANSI_CODES[FALLBACK_STYLE])}{text}{ANSI_RESET}"


def priority_badge(priority: str) -> Badge:
    """Badge for a priority value; unknown values get the fallback style."""
    return Badge(label=priority, style=PRIORITY_STYLES.get(priority, FALLBACK_STYLE))


def status_badge(status: str) -> Badge:
    """Badge for a status value; unknown values get the fallback style."""
    return Badge(label=status, style=STATUS_STYLES.get(status, FALLBACK_STYLE))
