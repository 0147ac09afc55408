"""Input loading: side files and per-kind request building."""

from ci_notify.loaders.requests import build_incident_context, build_request
from ci_notify.loaders.side_files import load_diagnosis, load_digest

__all__ = [
    "build_incident_context",
    "build_request",
    "load_diagnosis",
    "load_digest",
]
