"""HTML report template.

Templates use named placeholders such as ``{{firma_name}}``. Values are escaped on
substitution; only the table rows, which are built here from escaped cells, are
inserted as markup.
"""
from __future__ import annotations

from pathlib import Path

from jinja2 import Environment, TemplateError as JinjaTemplateError
from markupsafe import Markup

from ..core.exceptions import TemplateError
from .model import EmployeeReport

_env = Environment(autoescape=True)

_ROWS = _env.from_string(
    "{% for row in rows %}"
    "<tr>"
    "<td>{{ row.date }}</td>"
    "<td>{{ row.status }}</td>"
    "<td>{{ row.start }}</td>"
    "<td>{{ row.end }}</td>"
    "<td>{{ row.break_total }}</td>"
    "<td>{{ row.net_total }}</td>"
    "<td>{{ row.over_under }}</td>"
    "</tr>\n"
    "{% endfor %}"
)


class HtmlReportTemplate:
    def __init__(self, source: str):
        try:
            self._template = _env.from_string(source)
        except JinjaTemplateError as exc:
            raise TemplateError(f"invalid report template: {exc}") from exc

    @classmethod
    def load(cls, path: str | Path) -> "HtmlReportTemplate":
        path = Path(path)
        try:
            source = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise TemplateError(f"report template not found: {path}") from exc
        return cls(source)

    def render(self, report: EmployeeReport) -> str:
        table_rows = Markup(_ROWS.render(rows=report.rows))
        return self._template.render(table_rows=table_rows, **report.template_fields())
