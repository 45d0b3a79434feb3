"""Pipeline orchestration for DataVision uploads."""

from .pipeline import PipelineOrchestrator, PipelineResult

__all__ = ["PipelineOrchestrator", "PipelineResult"]
