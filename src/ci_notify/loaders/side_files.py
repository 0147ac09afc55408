# -*- coding: utf-8 -*-
"""Load-or-default readers for the side files produced by earlier pipeline steps.

Neither reader raises: a missing file silently yields the default, and an
unreadable or malformed file yields the default plus a diagnostic that is
also logged.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import structlog

from ci_notify.models.digest import DIGEST_PLACEHOLDER
from ci_notify.models.incident import Diagnosis
from ci_notify.models.load_result import LoadResult


def load_diagnosis(
    path: str | Path,
    *,
    get_logger: Callable[[str], Any] = structlog.get_logger,
) -> LoadResult[Diagnosis]:
    """Read diagnosis.json into a Diagnosis. Falls back to an empty Diagnosis."""
    logger = get_logger("loaders")
    file_path = Path(path)
    try:
        if not file_path.exists():
            logger.debug("diagnosis_file_missing", diagnosis_file=str(file_path))
            return LoadResult(Diagnosis.empty())
        raw = json.loads(file_path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        diagnostic = f"{type(exc).__name__}: {exc}"
        logger.warning(
            "diagnosis_load_failed",
            diagnosis_file=str(file_path),
            error_type=type(exc).__name__,
            error_message=str(exc),
        )
        return LoadResult(Diagnosis.empty(), diagnostic)

    if not isinstance(raw, dict):
        diagnostic = f"expected a JSON object, got {type(raw).__name__}"
        logger.warning(
            "diagnosis_load_failed",
            diagnosis_file=str(file_path),
            error_type="TypeError",
            error_message=diagnostic,
        )
        return LoadResult(Diagnosis.empty(), diagnostic)

    diagnosis = Diagnosis.from_response(raw)
    logger.debug(
        "diagnosis_loaded",
        diagnosis_file=str(file_path),
        affected_files_count=len(diagnosis.affected_files),
        verification_steps_count=len(diagnosis.verification_steps),
    )
    return LoadResult(diagnosis)


def load_digest(
    path: str | Path,
    *,
    get_logger: Callable[[str], Any] = structlog.get_logger,
) -> LoadResult[str]:
    """Read the digest HTML verbatim. Falls back to the placeholder paragraph."""
    logger = get_logger("loaders")
    file_path = Path(path)
    try:
        if not file_path.exists():
            logger.debug("digest_file_missing", digest_file=str(file_path))
            return LoadResult(DIGEST_PLACEHOLDER)
        html = file_path.read_text(encoding="utf-8")
    except (OSError, ValueError) as exc:
        logger.warning(
            "digest_load_failed",
            digest_file=str(file_path),
            error_type=type(exc).__name__,
            error_message=str(exc),
        )
        return LoadResult(DIGEST_PLACEHOLDER, f"{type(exc).__name__}: {exc}")

    logger.debug("digest_loaded", digest_file=str(file_path), digest_length=len(html))
    return LoadResult(html)
