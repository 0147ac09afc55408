# -*- coding: utf-8 -*-
"""Severity to header emoji/color mapping."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SeverityStyle:
    """Visual treatment of an incident severity."""

    emoji: str
    color: str


DEFAULT_SEVERITY_STYLE = SeverityStyle(emoji="⚠️", color="#f59e0b")

SEVERITY_STYLES: dict[str, SeverityStyle] = {
    "critical": SeverityStyle(emoji="🔴", color="#dc2626"),
    "high": SeverityStyle(emoji="🟠", color="#f59e0b"),
    "medium": SeverityStyle(emoji="🟡", color="#eab308"),
    "low": SeverityStyle(emoji="🟢", color="#22c55e"),
}


def severity_style(severity: str) -> SeverityStyle:
    """Style for severity. Case-sensitive: "Critical" gets the default style."""
    return SEVERITY_STYLES.get(severity, DEFAULT_SEVERITY_STYLE)
