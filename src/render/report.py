"""Generate a self-contained HTML report from a check result."""

import json
from pathlib import Path
from typing import Optional

from ..checker.check import load_result
from ..checker.models import CheckResult
from .html import escape_markup, render_html, result_css_class


DEFAULT_TITLE = "Tile Checker"


def render_page(result: CheckResult, title: str = DEFAULT_TITLE) -> str:
    """Wrap the result fragment in the report template."""
    template_path = Path(__file__).parent / "templates" / "report.html"
    with open(template_path) as f:
        template = f.read()

    html = template.replace("{{ title }}", escape_markup(title))
    html = html.replace("{{ result_class }}", result_css_class(result))
    html = html.replace("{{ result_html }}", render_html(result))
    return html


def write_html(result: CheckResult, output_path: str | Path, title: str = DEFAULT_TITLE) -> Path:
    """Write the HTML report, creating parent directories as needed."""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w") as f:
        f.write(render_page(result, title))
    return output_path


def generate_report(
    results_path: str | Path,
    output_path: Optional[str | Path] = None,
) -> Path:
    """
    Generate an HTML report from a result saved as JSON.

    Args:
        results_path: Path to the result JSON file
        output_path: Output path for HTML (defaults to same name with .html)

    Returns:
        Path to the generated HTML file
    """
    results_path = Path(results_path)
    if output_path is None:
        output_path = results_path.with_suffix(".html")

    with open(results_path) as f:
        result = load_result(json.load(f))

    return write_html(result, output_path, title=f"{DEFAULT_TITLE}: {results_path.stem}")
