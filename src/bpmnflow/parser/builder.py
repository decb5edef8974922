"""Incremental construction of a ProcessModel."""
import logging
from typing import Optional

from ..models.entities import Event, Node, NodeKind, SequenceFlow
from ..models.process import ProcessModel
from .classifier import Classified

logger = logging.getLogger(__name__)


class ProcessModelBuilder:
    """Mutable accumulator folded into an immutable ProcessModel by ``build``.

    Duplicate node ids and repeated start/end events are kept last-one-wins.
    """

    def __init__(self, process_id: str = "", process_name: str = "", signals: Optional[dict[str, str]] = None):
        self.process_id = process_id
        self.process_name = process_name
        self.signals = dict(signals or {})
        self.nodes: dict[str, Node] = {}
        self.sequence_flows: list[SequenceFlow] = []
        self.start_event: Optional[Event] = None
        self.end_event: Optional[Event] = None

    def add(self, record: Optional[Classified]) -> "ProcessModelBuilder":
        if record is None:
            return self
        if isinstance(record, SequenceFlow):
            self.sequence_flows.append(record)
            return self

        if record.id in self.nodes:
            logger.warning("Duplicate node id %r: %s replaces %s", record.id, record.kind.value, self.nodes[record.id].kind.value)
        self.nodes[record.id] = record

        if record.kind == NodeKind.START_EVENT:
            if self.start_event is not None:
                logger.warning("Start event %r replaced by %r", self.start_event.id, record.id)
            self.start_event = record
        elif record.kind == NodeKind.END_EVENT:
            if self.end_event is not None:
                logger.warning("End event %r replaced by %r", self.end_event.id, record.id)
            self.end_event = record
        return self

    def build(self) -> ProcessModel:
        return ProcessModel(
            process_id=self.process_id,
            process_name=self.process_name,
            nodes=dict(self.nodes),
            sequence_flows=tuple(self.sequence_flows),
            start_event=self.start_event,
            end_event=self.end_event,
            signals=dict(self.signals),
        )
