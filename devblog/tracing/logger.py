"""Startup tracing for the site core.

Events describe what the site core decided about its languages: which
ones were registered at startup and which keys a language falls back
on. Records go to stderr so CLI output stays clean.
"""

import logging
import sys
from dataclasses import dataclass, field
from datetime import datetime
from typing import TextIO

LOG_FORMAT = "[%(asctime)s] %(levelname)s - %(name)s - %(message)s"


@dataclass
class SiteEvent:
    """One traced decision about the site's languages."""

    event_type: str  # "startup", "locale_gap"
    component: str
    message: str
    language: str | None = None
    languages: list[str] = field(default_factory=list)
    keys: list[str] = field(default_factory=list)
    level: int = logging.INFO
    timestamp: datetime = field(default_factory=datetime.now)

    def render(self) -> str:
        text = f"[{self.component}] {self.event_type}: {self.message}"
        if self.language:
            text += f" | lang={self.language}"
        if self.languages:
            text += f" | languages={','.join(self.languages)}"
        if self.keys:
            text += f" | keys={len(self.keys)}"
        return text


class SiteTracer:
    """Keeps the events of one startup and forwards them to logging."""

    def __init__(self, name: str = "devblog", stream: TextIO | None = None):
        self.logger = logging.getLogger(name)
        self.events: list[SiteEvent] = []

        # One handler per startup; a previous stream may already be closed
        self.logger.handlers.clear()
        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))
        self.logger.addHandler(handler)
        self.logger.setLevel(logging.INFO)

    def record(self, event: SiteEvent) -> SiteEvent:
        self.events.append(event)
        self.logger.log(event.level, event.render())
        return event

    def events_for(
        self,
        component: str | None = None,
        language: str | None = None,
    ) -> list[SiteEvent]:
        """Events filtered by component and/or language."""
        return [
            e
            for e in self.events
            if (component is None or e.component == component)
            and (language is None or e.language == language)
        ]


_tracer: SiteTracer | None = None


def setup_tracing(log_level: str = "INFO", stream: TextIO | None = None) -> SiteTracer:
    """Start a fresh tracer for one site startup.

    Args:
        log_level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        stream: Output stream; stderr when omitted.

    Returns:
        The configured SiteTracer instance.
    """
    global _tracer
    _tracer = SiteTracer(stream=stream)
    _tracer.logger.setLevel(log_level.upper())
    return _tracer


def get_tracer() -> SiteTracer:
    global _tracer
    if _tracer is None:
        _tracer = SiteTracer()
    return _tracer


def log_site_event(
    event_type: str,
    component: str,
    message: str,
    *,
    language: str | None = None,
    languages: list[str] | None = None,
    keys: list[str] | None = None,
    level: int = logging.INFO,
) -> SiteEvent:
    """Record a site event on the current tracer."""
    return get_tracer().record(
        SiteEvent(
            event_type=event_type,
            component=component,
            message=message,
            language=language,
            languages=list(languages or []),
            keys=list(keys or []),
            level=level,
        )
    )
