"""Report generators for process analyses."""
from .report_generator import ReportGenerator

__all__ = ["ReportGenerator"]
