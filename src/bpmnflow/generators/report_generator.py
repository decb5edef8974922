"""Plain-text analysis report generator."""
from pathlib import Path
from jinja2 import Template

from ..models.process import ProcessAnalysis


REPORT_TEMPLATE = """=============================================
=          BPMN 2.0 Process Analyzer        =
=============================================
Analyzed file: {{ analysis.source or "<in-memory document>" }}
{% if analysis.process_id or analysis.process_name %}
Process: {{ analysis.process_id }}{% if analysis.process_name %} ({{ analysis.process_name }}){% endif %}

{% endif %}

--- Tasks ---
{% for task in analysis.tasks %}
  - ID: {{ "%-25s"|format(task.id) }} | Type: {{ "%-15s"|format(task.kind.value) }} | Name: {{ task.name }}
{% else %}
No tasks found.
{% endfor %}

--- Events ---
{% for event in analysis.events %}
  - ID: {{ "%-25s"|format(event.id) }} | Type: {{ "%-25s"|format(event.kind.value) }} | Name: {{ event.name }}{% if event.signal_name %} (Signal: {{ event.signal_name }}){% endif %}

{% else %}
No events found.
{% endfor %}

--- Start and End ---
{% if analysis.start_event %}
Start event: {{ analysis.start_event.id }} ({{ analysis.start_event.name }})
{% else %}
No start event found.
{% endif %}
{% if analysis.end_event %}
End event  : {{ analysis.end_event.id }} ({{ analysis.end_event.name }})
{% else %}
No end event found.
{% endif %}

--- Process Sequence ---
{% if analysis.path %}
{{ analysis.path|join(" -> ") }}
{% if not analysis.completed %}
(flow stops before the end event)
{% endif %}
{% else %}
Unable to determine the process flow.
{% endif %}
"""


class ReportGenerator:
    """Render a ProcessAnalysis as the console report."""

    def __init__(self):
        self.template = Template(REPORT_TEMPLATE, trim_blocks=True, lstrip_blocks=True)

    def generate(self, analysis: ProcessAnalysis) -> str:
        return self.template.render(analysis=analysis)

    def save(self, report: str, output_path: str) -> str:
        """Save report text to file."""
        path = Path(output_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(report, encoding="utf-8")
        return str(path)
