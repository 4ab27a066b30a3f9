"""Plain-text rendering of check results for the terminal."""

from typing import Dict, List

from ..checker.models import CheckResult, InputTooLarge, RowOverflow, Satisfied, Unsatisfiable


def _rows(rows: List[str]) -> List[str]:
    return [f"Row {i + 1}: {row}" for i, row in enumerate(rows)]


def _counts(counts: Dict[str, int]) -> List[str]:
    return [f"  {label}: {count}" for label, count in counts.items()]


def render_text(result: CheckResult) -> str:
    """Render any result variant as a multi-line report."""
    lines: List[str] = []

    if isinstance(result, InputTooLarge):
        lines.append(f"FAILURE: Input too large: {result.what} size {result.size} exceeds the limit of {result.limit}.")

    elif isinstance(result, RowOverflow):
        lines.append(
            f"FAILURE: Not enough rows. Phrase needs {result.required_rows} rows "
            f"but only {result.available_rows} available."
        )
        lines.extend(_rows(result.wrapped_rows))

    elif isinstance(result, Unsatisfiable):
        lines.append("FAILURE: Tiles are insufficient to construct the phrase.")
        lines.extend(_rows(result.wrapped_rows))
        lines.append("Missing characters:")
        lines.extend(_counts(result.missing_by_char))

    elif isinstance(result, Satisfied):
        lines.append("SUCCESS: Phrase can be constructed.")
        lines.append("Tiles needed (counts):")
        lines.extend(_counts(result.needed_by_label) or ["  None"])
        lines.extend(_rows(result.wrapped_rows))
        if result.leftover is not None:
            lines.append(f"Leftover tiles: {result.leftover.total} remaining")
            lines.extend(_counts(result.leftover.by_label))

    else:
        raise TypeError(f"Unknown result type: {type(result).__name__}")

    return "\n".join(lines)
