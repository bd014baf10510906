#
# src/minitest_guard/ui/notifier.py
#
"""
Notifiers carrying the outcome of runs whose test output the host cannot see.
"""
import structlog
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from minitest_guard.exceptions import ConfigurationError
from minitest_guard.protocols import NotificationImage, Notifier
from minitest_guard.telemetry import StructLogger

log: StructLogger = structlog.get_logger("ui.notifier")

IMAGE_STYLES: dict[str, str] = {
    "success": "green",
    "failed": "red",
}


class ConsoleNotifier(Notifier):
    """Shows the result as a coloured panel."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console(highlight=False)

    def notify(self, message: str, title: str, image: NotificationImage) -> None:
        style = IMAGE_STYLES.get(image, "yellow")
        self.console.print(Panel(Text(message), title=title, subtitle=image, border_style=style))
        log.debug("Notification shown", title=title, image=image)


class LogNotifier(Notifier):
    """Reports the result through the log only."""

    def notify(self, message: str, title: str, image: NotificationImage) -> None:
        log_func = log.info if image == "success" else log.warning
        log_func(title, message=message, image=image, emoji_key="success" if image == "success" else "fail")


class NullNotifier(Notifier):
    """Drops notifications."""

    def notify(self, message: str, title: str, image: NotificationImage) -> None:
        return None


NOTIFIER_MAP = {
    "console": ConsoleNotifier,
    "log": LogNotifier,
    "none": NullNotifier,
}


def get_notifier(name: str) -> Notifier:
    """
    Factory function to get an instance of a Notifier.
    """
    notifier_key = name.lower()
    notifier_class = NOTIFIER_MAP.get(notifier_key)

    if not notifier_class:
        log.error("Unsupported notifier specified", notifier=name)
        raise ConfigurationError(
            f"Unsupported notifier: '{name}'. "
            f"Available notifiers: {list(NOTIFIER_MAP.keys())}"
        )

    log.debug("Instantiating notifier", notifier=name)
    return notifier_class()

# 🔼⚙️
