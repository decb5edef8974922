"""BPMN document parsing."""
from .bpmn_parser import BpmnParser, parse_bpmn
from .builder import ProcessModelBuilder
from .classifier import ElementClassifier, ELEMENT_CONSTRUCTORS
from .exceptions import BpmnParseError, ProcessNotFoundError
from .signals import SignalCatalog

__all__ = [
    "BpmnParser",
    "parse_bpmn",
    "ProcessModelBuilder",
    "ElementClassifier",
    "ELEMENT_CONSTRUCTORS",
    "BpmnParseError",
    "ProcessNotFoundError",
    "SignalCatalog",
]
