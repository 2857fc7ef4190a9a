"""Orchestration layer running a workload inside a logged session."""

from .runner import WorkloadRunner

__all__ = ["WorkloadRunner"]
