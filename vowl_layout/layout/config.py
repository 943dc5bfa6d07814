"""
Layout configurations for the force simulation.

The defaults follow the d3-force conventions: a negative charge strength
repels, and an alpha decay of 0.0228 takes alpha from 1.0 below 0.001 in
about 300 ticks.
"""

from dataclasses import dataclass, asdict
from typing import Dict, Any, Tuple


@dataclass
class LayoutConfig:
    """Force simulation parameters."""
    name: str = "default"
    alpha: float = 1.0  # Start energy
    alpha_decay: float = 0.0228
    alpha_min: float = 0.001
    velocity_decay: float = 0.6  # Multiplied into velocity each tick
    link_distance: float = 30.0
    link_strength: float = 1.0
    charge_strength: float = -30.0  # Negative = repulsive
    center_strength: float = 1.0
    center: Tuple[float, float] = (0.0, 0.0)


DEFAULT_LAYOUT = LayoutConfig()

COMPACT_LAYOUT = LayoutConfig(
    name="compact",
    link_distance=15.0,
    charge_strength=-10.0,
    center_strength=1.0,
)

SPREAD_LAYOUT = LayoutConfig(
    name="spread",
    link_distance=80.0,
    charge_strength=-300.0,
    center_strength=0.1,
)

QUICK_LAYOUT = LayoutConfig(
    name="quick",
    alpha_decay=0.1,  # Converges in ~66 ticks
    alpha_min=0.001,
)


def get_layout_config(name: str = "default") -> LayoutConfig:
    """
    Get a named layout configuration.

    Args:
        name: Preset name ("default", "compact", "spread", "quick")

    Returns:
        A copy of the preset, safe to modify
    """
    configs = {
        "default": DEFAULT_LAYOUT,
        "compact": COMPACT_LAYOUT,
        "spread": SPREAD_LAYOUT,
        "quick": QUICK_LAYOUT,
    }

    if name in configs:
        return dict_to_config(config_to_dict(configs[name]))

    raise ValueError(f"Unknown layout preset: {name}")


def config_to_dict(config: LayoutConfig) -> Dict[str, Any]:
    """Convert a config dataclass to dictionary."""
    return asdict(config)


def dict_to_config(d: Dict[str, Any]) -> LayoutConfig:
    """Convert dictionary to config dataclass."""
    d = dict(d)
    if 'center' in d:
        d['center'] = tuple(d['center'])
    return LayoutConfig(**d)


ALL_LAYOUT_CONFIGS = [
    DEFAULT_LAYOUT,
    COMPACT_LAYOUT,
    SPREAD_LAYOUT,
    QUICK_LAYOUT,
]
