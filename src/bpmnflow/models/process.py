"""Process-level models: the parsed process graph and analysis results."""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .entities import Event, Node, SequenceFlow, Task


class ProcessModel(BaseModel):
    """Immutable graph of one BPMN process.

    ``nodes`` keeps the order in which each id first appeared in the document,
    ``sequence_flows`` keeps document order. Start and end events are the last
    ones declared.
    """
    model_config = ConfigDict(frozen=True)

    process_id: str = ""
    process_name: str = ""
    nodes: dict[str, Node] = Field(default_factory=dict)
    sequence_flows: tuple[SequenceFlow, ...] = ()
    start_event: Optional[Event] = None
    end_event: Optional[Event] = None
    signals: dict[str, str] = Field(default_factory=dict)

    @property
    def tasks(self) -> list[Task]:
        return [n for n in self.nodes.values() if isinstance(n, Task)]

    @property
    def events(self) -> list[Event]:
        return [n for n in self.nodes.values() if isinstance(n, Event)]

    def get_node(self, node_id: str) -> Optional[Node]:
        return self.nodes.get(node_id)

    def outgoing(self, node_id: str) -> list[SequenceFlow]:
        """Sequence flows leaving ``node_id``, in declaration order."""
        return [f for f in self.sequence_flows if f.source_ref == node_id]


class FlowTrace(BaseModel):
    """Result of walking a process from its start event."""
    model_config = ConfigDict(frozen=True)

    nodes: list[Node] = Field(default_factory=list)
    flows: list[SequenceFlow] = Field(default_factory=list)
    completed: bool = False  # True only when the walk reached the end event

    @property
    def node_ids(self) -> list[str]:
        return [n.id for n in self.nodes]

    @property
    def flow_ids(self) -> list[str]:
        return [f.id for f in self.flows]


class ProcessAnalysis(BaseModel):
    """Serialisable summary handed to the CLI, report and API layers."""
    source: str = ""
    process_id: str = ""
    process_name: str = ""
    tasks: list[Task] = Field(default_factory=list)
    events: list[Event] = Field(default_factory=list)
    start_event: Optional[Event] = None
    end_event: Optional[Event] = None
    path: list[str] = Field(default_factory=list)
    followed_flows: list[str] = Field(default_factory=list)
    completed: bool = False
