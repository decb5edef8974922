"""Execution path reconstruction."""
from .reconstructor import FlowReconstructor, reconstruct, trace

__all__ = ["FlowReconstructor", "reconstruct", "trace"]
