"""Result projection, terminal rendering, and JSON output."""

from .reporter import build_payload, build_result
from .stdout import StdoutReporter
from .writer import write_results_json

__all__ = ["StdoutReporter", "build_payload", "build_result", "write_results_json"]
