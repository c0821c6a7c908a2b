"""Human-readable stdout reporter for classification results."""

from __future__ import annotations

from collections.abc import Sequence

from sutrachain.constants.branding import ASCII_LOGO_LINES, CLASSIFY_SUMMARY_TITLE
from sutrachain.constants.reporting import ANSI_DIM, ANSI_GREEN, ANSI_RED, ANSI_RESET, ANSI_YELLOW
from sutrachain.model import ClassificationResult, RuleAnalysis, RuleVerdict
from sutrachain.types import EffectValue


def _colorize(text: str, color: str) -> str:
    return f"{color}{text}{ANSI_RESET}"


def _format_effect(value: EffectValue) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class StdoutReporter:
    """Formats classification results as compact terminal output."""

    def __init__(
        self,
        results: Sequence[ClassificationResult | RuleAnalysis],
        *,
        family: str,
        strategy: str,
        color: bool = True,
        verbose: bool = False,
    ) -> None:
        self._results = list(results)
        self._family = family
        self._strategy = strategy
        self._color = color
        self._verbose = verbose

    def render(self) -> str:
        """Render the full stdout report as a single string."""
        sections = [self._render_header()]
        for item in self._results:
            sections.append(self._render_item(item))
        return "\n".join(section for section in sections if section)

    def _render_header(self) -> str:
        sep = "  " + "─" * 38
        matched = sum(1 for item in self._results if self._result_of(item).applies)
        lines = [
            "",
            f"  {ASCII_LOGO_LINES[0]}",
            f"  {ASCII_LOGO_LINES[1]}",
            f"  {CLASSIFY_SUMMARY_TITLE}",
            sep,
            "",
            f"  Family      {self._family} ({self._strategy})",
            f"  Words       {len(self._results)} classified / {matched} applies",
            "",
        ]
        return "\n".join(lines)

    def _render_item(self, item: ClassificationResult | RuleAnalysis) -> str:
        result = self._result_of(item)
        token = result.token
        label = token.raw or token.text or "<invalid>"
        if token.raw and token.text and token.raw != token.text:
            label = f"{label} ({token.text})"

        verdict = "APPLIES" if result.applies else "no"
        if self._color:
            verdict = _colorize(verdict, ANSI_GREEN if result.applies else ANSI_RED)

        lines = [f"  {label:<24}  {verdict}  confidence={result.confidence:.2f}"]
        if result.fired_rule_ids:
            lines.append(f"    fired     {', '.join(result.fired_rule_ids)}")
        if result.applies or self._verbose:
            lines.append(f"    reasons   {self._dim(', '.join(result.reasons) or '-')}")
        effects = ", ".join(f"{key}={_format_effect(value)}" for key, value in sorted(result.effects.items()))
        lines.append(f"    effects   {effects}")

        if isinstance(item, RuleAnalysis):
            lines.extend(self._render_verdict(verdict_row) for verdict_row in item.verdicts)
        return "\n".join(lines)

    def _render_verdict(self, verdict: RuleVerdict) -> str:
        mark = "+" if verdict.applies else ("!" if verdict.error else "-")
        if self._color and verdict.error:
            mark = _colorize(mark, ANSI_YELLOW)
        return f"    {mark} {verdict.rule_id:<18} {verdict.kind:<10} {self._dim(verdict.reason)}"

    def _dim(self, text: str) -> str:
        return _colorize(text, ANSI_DIM) if self._color else text

    @staticmethod
    def _result_of(item: ClassificationResult | RuleAnalysis) -> ClassificationResult:
        return item.result if isinstance(item, RuleAnalysis) else item
