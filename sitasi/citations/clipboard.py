"""Copying formatted citations to the system clipboard.

The CopySink writes a citation through a clipboard backend and reports the
outcome as a transient notification. Failures never propagate to the
caller: they become an error notification and a ``False`` return value.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from typing import Protocol

import msgspec
import pyperclip

from sitasi.citations.styles import CitationStyle
from sitasi.core.exceptions import ClipboardError

logger = logging.getLogger(__name__)

COPIED_MARKER_SECONDS = 2.0

DEFAULT_MESSAGES = {
    "copy_success_title": "Berhasil Disalin!",
    "copy_success_description": "Citation format {style} telah disalin ke clipboard.",
    "copy_error_title": "Gagal Menyalin",
    "copy_error_description": "Tidak dapat menyalin ke clipboard.",
}


def _normalize_style(style: CitationStyle | str) -> CitationStyle | str:
    """Map style names to CitationStyle members, leaving unknown names as-is."""
    try:
        return CitationStyle.from_name(style)
    except ValueError:
        return style


class Notification(msgspec.Struct, frozen=True):
    """Transient user-facing message about a copy attempt."""

    title: str
    description: str
    variant: str = "default"

    @property
    def is_error(self) -> bool:
        return self.variant == "destructive"


class ClipboardBackend(Protocol):
    """Protocol for clipboard backends."""

    def copy(self, text: str) -> None:
        """Write text to the clipboard, raising on failure."""
        ...


class PyperclipBackend:
    """Clipboard backend using pyperclip."""

    def copy(self, text: str) -> None:
        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as e:
            raise ClipboardError(str(e)) from e


class CopySink:
    """Copies citations to the clipboard and tracks the last copied style.

    After a successful copy the style is marked as "just copied" for
    ``marker_duration`` seconds. Only one style carries the marker at a
    time; a later copy replaces it.
    """

    def __init__(
        self,
        backend: ClipboardBackend | None = None,
        notify: Callable[[Notification], None] | None = None,
        clock: Callable[[], float] = time.monotonic,
        marker_duration: float = COPIED_MARKER_SECONDS,
        messages: dict[str, str] | None = None,
    ):
        """Initialize sink.

        Args:
            backend: Clipboard backend (defaults to pyperclip)
            notify: Callback receiving success/error notifications
            clock: Monotonic clock in seconds
            marker_duration: Seconds a style stays marked as copied
            messages: Overrides for notification texts
        """
        self.backend = backend or PyperclipBackend()
        self.notify = notify
        self.clock = clock
        self.marker_duration = marker_duration
        self.messages = {**DEFAULT_MESSAGES, **(messages or {})}
        self._copied: CitationStyle | str | None = None
        self._copied_until = 0.0

    def copy(self, style: CitationStyle | str, text: str) -> bool:
        """Copy a formatted citation.

        Args:
            style: Style the text was formatted in
            text: Citation text

        Returns:
            True if the text reached the clipboard
        """
        style = _normalize_style(style)
        try:
            self.backend.copy(text)
        except Exception as e:
            logger.warning("Failed to copy %s citation: %s", style, e)
            self._emit(
                Notification(
                    title=self.messages["copy_error_title"],
                    description=self.messages["copy_error_description"],
                    variant="destructive",
                )
            )
            return False

        self._copied = style
        self._copied_until = self.clock() + self.marker_duration
        logger.debug("Copied %s citation (%d chars)", style, len(text))
        self._emit(
            Notification(
                title=self.messages["copy_success_title"],
                description=self._success_description(style),
            )
        )
        return True

    @property
    def copied_style(self) -> CitationStyle | str | None:
        """Style copied within the marker window, if any."""
        if self._copied is not None and self.clock() >= self._copied_until:
            self._copied = None
        return self._copied

    def is_copied(self, style: CitationStyle | str) -> bool:
        """Check whether a style is currently marked as just copied."""
        return self.copied_style == _normalize_style(style)

    def _success_description(self, style: CitationStyle | str) -> str:
        template = self.messages["copy_success_description"]
        try:
            return template.format(style=style)
        except (KeyError, IndexError, ValueError, AttributeError) as e:
            logger.warning("Invalid copy_success_description %r: %s", template, e)
            return DEFAULT_MESSAGES["copy_success_description"].format(style=style)

    def _emit(self, notification: Notification) -> None:
        if self.notify is None:
            return
        try:
            self.notify(notification)
        except Exception:
            logger.exception("Notification callback failed")
