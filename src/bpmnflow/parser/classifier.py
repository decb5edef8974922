"""Classification of process child elements into typed nodes and flows."""
import logging
from typing import Callable, Optional, Union

from ..models.entities import Event, NodeKind, SequenceFlow, Task
from .signals import SignalCatalog
from .tags import first_tagged, local_name

logger = logging.getLogger(__name__)

Classified = Union[Task, Event, SequenceFlow]


def _task(kind: NodeKind) -> Callable:
    def build(element, signals: SignalCatalog) -> Task:
        return Task(id=element.get("id", ""), name=element.get("name", ""), kind=kind)
    return build


def _event(kind: NodeKind, with_signal: bool = False) -> Callable:
    def build(element, signals: SignalCatalog) -> Event:
        return Event(
            id=element.get("id", ""),
            name=element.get("name", ""),
            kind=kind,
            signal_name=resolve_signal_name(element, signals) if with_signal else None,
        )
    return build


def _sequence_flow(element, signals: SignalCatalog) -> SequenceFlow:
    return SequenceFlow(
        id=element.get("id", ""),
        source_ref=element.get("sourceRef", ""),
        target_ref=element.get("targetRef", ""),
    )


# New task or event kinds are one entry here.
ELEMENT_CONSTRUCTORS: dict[str, Callable] = {
    "startEvent": _event(NodeKind.START_EVENT),
    "endEvent": _event(NodeKind.END_EVENT),
    "intermediateCatchEvent": _event(NodeKind.INTERMEDIATE_CATCH_EVENT, with_signal=True),
    "userTask": _task(NodeKind.USER_TASK),
    "serviceTask": _task(NodeKind.SERVICE_TASK),
    "sequenceFlow": _sequence_flow,
}


def resolve_signal_name(element, signals: SignalCatalog) -> Optional[str]:
    """Signal name for a catch event.

    None when the event has no signalEventDefinition; a placeholder when the
    definition points at a signal id the catalog does not know.
    """
    definition = first_tagged(element, "signalEventDefinition")
    if definition is None:
        return None
    return signals.resolve(definition.get("signalRef", ""))


class ElementClassifier:
    """Map one child of <process> to a Task, Event, SequenceFlow or nothing."""

    def __init__(self, signals: SignalCatalog, constructors: Optional[dict[str, Callable]] = None):
        self.signals = signals
        self.constructors = constructors if constructors is not None else ELEMENT_CONSTRUCTORS

    def classify(self, element) -> Optional[Classified]:
        tag = local_name(element)
        constructor = self.constructors.get(tag)
        if constructor is None:
            logger.debug("Ignoring element <%s>", tag)
            return None
        record = constructor(element, self.signals)
        logger.debug("Classified <%s id=%r>", tag, record.id)
        return record
