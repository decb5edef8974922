"""End-to-end analysis of BPMN documents."""
from .analyzer import BpmnAnalyzer, analyze

__all__ = ["BpmnAnalyzer", "analyze"]
