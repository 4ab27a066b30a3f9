"""HTML rendering of check results."""

from typing import Dict, List

from ..checker.models import CheckResult, InputTooLarge, RowOverflow, Satisfied, Unsatisfiable


def escape_markup(text: str) -> str:
    """Escape the characters that would otherwise be read as markup."""
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


def render_rows(rows: List[str]) -> str:
    return "".join(
        f'<div class="row"><strong>Row {i + 1}:</strong> <span class="line">{escape_markup(row)}</span></div>'
        for i, row in enumerate(rows)
    )


def render_counts(counts: Dict[str, int]) -> str:
    return "".join(f"<div>{escape_markup(label)}: {count}</div>" for label, count in counts.items())


def render_html(result: CheckResult) -> str:
    """Render the result panel fragment for any result variant."""
    if isinstance(result, InputTooLarge):
        return (
            f"<div><strong>FAILURE:</strong> Input too large: {result.what} size "
            f"{result.size} exceeds the limit of {result.limit}.</div>"
        )

    if isinstance(result, RowOverflow):
        return (
            f"<div><strong>FAILURE:</strong> Not enough rows. Phrase needs "
            f"{result.required_rows} rows but only {result.available_rows} available.</div>"
            f'<div class="mapping">{render_rows(result.wrapped_rows)}</div>'
        )

    if isinstance(result, Unsatisfiable):
        return (
            "<div><strong>FAILURE:</strong> Tiles are insufficient to construct the phrase.</div>"
            f'<div class="mapping">{render_rows(result.wrapped_rows)}</div>'
            '<div class="mapping"><strong>Missing characters:</strong><br/>'
            f"{render_counts(result.missing_by_char)}</div>"
        )

    if isinstance(result, Satisfied):
        needed = render_counts(result.needed_by_label) or "<div>None</div>"
        html = (
            "<div><strong>SUCCESS:</strong> Phrase can be constructed.</div>"
            f'<div class="mapping"><strong>Tiles needed (counts):</strong><div>{needed}</div></div>'
            f'<div class="mapping">{render_rows(result.wrapped_rows)}</div>'
        )
        if result.leftover is not None:
            html += (
                f'<div class="mapping"><strong>Leftover tiles:</strong> {result.leftover.total} remaining</div>'
                f'<div class="mapping">{render_counts(result.leftover.by_label)}</div>'
            )
        return html

    raise TypeError(f"Unknown result type: {type(result).__name__}")


def result_css_class(result: CheckResult) -> str:
    return "result success" if result.ok else "result failure"
