"""Entity models for BPMN process nodes and sequence flows."""
from enum import Enum
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class NodeKind(str, Enum):
    USER_TASK = "userTask"
    SERVICE_TASK = "serviceTask"
    START_EVENT = "startEvent"
    END_EVENT = "endEvent"
    INTERMEDIATE_CATCH_EVENT = "intermediateCatchEvent"


# Base Entity
class BaseNode(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str = ""
    kind: NodeKind


class Task(BaseNode):
    node_type: Literal["task"] = "task"


class Event(BaseNode):
    node_type: Literal["event"] = "event"
    signal_name: Optional[str] = None  # None: no signalEventDefinition at all


Node = Annotated[Union[Task, Event], Field(discriminator="node_type")]


class SequenceFlow(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    source_ref: str
    target_ref: str
