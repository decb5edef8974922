"""Orchestrates parsing and flow reconstruction for one BPMN document."""
import logging
from pathlib import Path

from ..flow.reconstructor import FlowReconstructor
from ..models.process import FlowTrace, ProcessAnalysis, ProcessModel
from ..parser.bpmn_parser import BpmnParser, Source

logger = logging.getLogger(__name__)


class BpmnAnalyzer:
    """Parse a document, then derive its linear execution path."""

    def __init__(self, parser: BpmnParser = None):
        self.parser = parser or BpmnParser()

    def analyze(self, source: Source, label: str = None) -> ProcessAnalysis:
        model = self.parser.parse(source)
        if label is None and isinstance(source, (str, Path)) and not str(source).lstrip().startswith("<"):
            label = str(source)
        return self.summarize(model, label or "")

    def summarize(self, model: ProcessModel, label: str = "") -> ProcessAnalysis:
        flow_trace: FlowTrace = FlowReconstructor(model).trace()
        if not flow_trace.completed:
            logger.info("Process %r: flow did not reach an end event", model.process_id)
        return ProcessAnalysis(
            source=label,
            process_id=model.process_id,
            process_name=model.process_name,
            tasks=model.tasks,
            events=model.events,
            start_event=model.start_event,
            end_event=model.end_event,
            path=flow_trace.node_ids,
            followed_flows=flow_trace.flow_ids,
            completed=flow_trace.completed,
        )


def analyze(source: Source, label: str = None) -> ProcessAnalysis:
    return BpmnAnalyzer().analyze(source, label)
