"""Data models for bpmnflow."""
from .entities import (
    NodeKind,
    Task,
    Event,
    Node,
    SequenceFlow,
)
from .process import ProcessModel, FlowTrace, ProcessAnalysis

__all__ = [
    "NodeKind",
    "Task",
    "Event",
    "Node",
    "SequenceFlow",
    "ProcessModel",
    "FlowTrace",
    "ProcessAnalysis",
]
