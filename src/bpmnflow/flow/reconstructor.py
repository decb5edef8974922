"""Linear path reconstruction over a process model's sequence flows."""
import logging
from collections import defaultdict

from ..models.entities import Node, SequenceFlow
from ..models.process import FlowTrace, ProcessModel

logger = logging.getLogger(__name__)


class FlowReconstructor:
    """Walk sequence flows from the start event towards the end event.

    Each step follows the earliest-declared outgoing flow that has not been
    followed yet, so gateways are not modelled and every flow id is used at
    most once. The walk therefore stops after at most ``len(flows) + 1`` nodes
    even on cyclic graphs. It never raises: a missing start event gives an
    empty path, and a node without unused outgoing flows or a flow pointing at
    an undeclared node truncates it.
    """

    def __init__(self, model: ProcessModel):
        self.model = model
        self._outgoing: dict[str, list[SequenceFlow]] = defaultdict(list)
        for flow in model.sequence_flows:
            self._outgoing[flow.source_ref].append(flow)

    def trace(self) -> FlowTrace:
        start = self.model.start_event
        if start is None:
            logger.warning("No start event; process flow cannot be determined")
            return FlowTrace()

        end_id = self.model.end_event.id if self.model.end_event is not None else None
        path: list[Node] = []
        followed: list[SequenceFlow] = []
        visited: set[str] = set()
        current = start

        while current is not None:
            path.append(current)
            if current.id == end_id:
                return FlowTrace(nodes=path, flows=followed, completed=True)

            next_flow = self._next_flow(current.id, visited)
            if next_flow is None:
                logger.warning("Path truncated at %r: no unvisited outgoing sequence flow", current.id)
                break

            visited.add(next_flow.id)
            followed.append(next_flow)
            logger.debug("Following %s: %s -> %s", next_flow.id, next_flow.source_ref, next_flow.target_ref)
            current = self.model.get_node(next_flow.target_ref)
            if current is None:
                logger.warning("Sequence flow %r targets undeclared node %r", next_flow.id, next_flow.target_ref)

        return FlowTrace(nodes=path, flows=followed, completed=False)

    def reconstruct(self) -> list[Node]:
        return self.trace().nodes

    def _next_flow(self, node_id: str, visited: set[str]):
        for flow in self._outgoing.get(node_id, ()):
            if flow.id not in visited:
                return flow
        return None


def reconstruct(model: ProcessModel) -> list[Node]:
    """Ordered nodes from the start event, possibly empty or truncated."""
    return FlowReconstructor(model).reconstruct()


def trace(model: ProcessModel) -> FlowTrace:
    return FlowReconstructor(model).trace()
