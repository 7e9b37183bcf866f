from application.generator.renderers.base import StepRenderer
from application.generator.renderers.batchlet_renderer import BatchletRenderer
from application.generator.renderers.chunk_renderer import ChunkRenderer
from application.generator.renderers.decision_renderer import DecisionRenderer
from application.generator.renderers.flow_renderer import FlowRenderer
from application.generator.renderers.split_renderer import SplitRenderer

__all__ = [
    "StepRenderer",
    "BatchletRenderer",
    "ChunkRenderer",
    "DecisionRenderer",
    "FlowRenderer",
    "SplitRenderer",
]
