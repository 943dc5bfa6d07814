"""Force-directed layout for ontology graphs."""

from .config import LayoutConfig, get_layout_config, DEFAULT_LAYOUT
from .simulation import ForceSimulation, LayoutAlgorithm, SimulationState

__all__ = [
    'LayoutConfig',
    'get_layout_config',
    'DEFAULT_LAYOUT',
    'ForceSimulation',
    'LayoutAlgorithm',
    'SimulationState'
]
