"""JSON output writer for classification results."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from sutrachain.constants.reporting import REPORT_TEMP_PREFIX, REPORT_TEMP_SUFFIX
from sutrachain.io import write_json_atomic
from sutrachain.model import ClassificationResult, RuleAnalysis
from sutrachain.reporting.reporter import build_payload


def write_results_json(path: Path, results: Sequence[ClassificationResult | RuleAnalysis]) -> None:
    """Write *results* to *path* atomically as a versioned JSON document."""
    write_json_atomic(
        path=path,
        payload=build_payload(results),
        temp_prefix=REPORT_TEMP_PREFIX,
        temp_suffix=REPORT_TEMP_SUFFIX,
    )
