"""Run driver and plan execution."""

from extscaffold.engine.driver import ExecutionDriver, RunState
from extscaffold.engine.executor import PlanExecutor
from extscaffold.engine.summary import build_summary

__all__ = ["ExecutionDriver", "PlanExecutor", "RunState", "build_summary"]
