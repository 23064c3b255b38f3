"""Tracing and logging for the site core."""

from .logger import SiteEvent, SiteTracer, get_tracer, log_site_event, setup_tracing

__all__ = [
    "SiteEvent",
    "SiteTracer",
    "setup_tracing",
    "get_tracer",
    "log_site_event",
]
