"""Errors raised while turning a BPMN document into a process model."""


class BpmnParseError(Exception):
    """Base class for structural problems in a BPMN document."""


class ProcessNotFoundError(BpmnParseError):
    """The document has no <process> element, namespaced or bare."""

    def __init__(self, message: str = "No <process> element found in the BPMN document."):
        super().__init__(message)
