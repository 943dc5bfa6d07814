"""
Force-directed layout simulation.

Each tick sums, for every node, the charge repulsion from all other
nodes, a spring attraction toward each outgoing neighbour scaled by the
current alpha, and a pull toward the configured center. Velocities are
integrated with damping and alpha decays geometrically until it drops
below ``alpha_min``.
"""

import logging
import math
from abc import ABC, abstractmethod
from dataclasses import replace
from enum import Enum
from typing import Optional

import numpy as np

from ..graph.ontology_graph import OntologyGraph
from .config import LayoutConfig
from .forces import pairwise_repulsion, calculate_attraction, calculate_center_force, apply_damping

logger = logging.getLogger(__name__)

INITIAL_RADIUS = 10.0


class LayoutAlgorithm(ABC):
    """Common interface for iterative layout algorithms."""

    @abstractmethod
    def initialize(self, graph: OntologyGraph):
        """Prepare node positions and reset the algorithm's state."""

    @abstractmethod
    def tick(self, graph: OntologyGraph):
        """Advance the layout by one step."""

    @abstractmethod
    def run(self, graph: OntologyGraph, iterations: int) -> int:
        """Initialize, then step up to ``iterations`` times."""

    @abstractmethod
    def is_finished(self) -> bool:
        pass

    @abstractmethod
    def alpha(self) -> float:
        pass


class SimulationState(Enum):
    UNINITIALIZED = "uninitialized"
    RUNNING = "running"
    CONVERGED = "converged"


class ForceSimulation(LayoutAlgorithm):
    """
    Force-directed layout in the style of d3-force.

    Repulsion is evaluated over all node pairs, so each tick is O(n^2);
    this is meant for graphs of up to a few hundred nodes.

    Attraction only follows outgoing edges (see ``OntologyGraph.neighbors``):
    a node is pulled toward its successors but not toward its predecessors,
    so layouts are directionally asymmetric.

    Convergence is not latched: ``is_finished`` and ``state`` compare the
    current alpha against the current ``alpha_min``, so lowering
    ``alpha_min`` after convergence puts the simulation back to RUNNING and
    further ticks resume the decay.
    """

    def __init__(self, config: Optional[LayoutConfig] = None):
        self.config = replace(config) if config is not None else LayoutConfig()
        self._alpha = self.config.alpha
        self.iteration = 0
        self._initialized = False

    @classmethod
    def with_config(cls, config: LayoutConfig) -> "ForceSimulation":
        return cls(config)

    @property
    def state(self) -> SimulationState:
        if self.is_finished():
            return SimulationState.CONVERGED
        if not self._initialized:
            return SimulationState.UNINITIALIZED
        return SimulationState.RUNNING

    # Setters take effect from the next tick.

    def set_alpha(self, alpha: float):
        """Set the start energy used by the next ``initialize``."""
        self.config.alpha = alpha

    def set_alpha_decay(self, decay: float):
        self.config.alpha_decay = decay

    def set_alpha_min(self, alpha_min: float):
        self.config.alpha_min = alpha_min

    def set_velocity_decay(self, decay: float):
        self.config.velocity_decay = decay

    def set_link_distance(self, distance: float):
        self.config.link_distance = distance

    def set_link_strength(self, strength: float):
        self.config.link_strength = strength

    def set_charge_strength(self, strength: float):
        self.config.charge_strength = strength

    def set_center_strength(self, strength: float):
        self.config.center_strength = strength

    def set_center(self, x: float, y: float):
        self.config.center = (x, y)

    def _initialize_positions(self, graph: OntologyGraph):
        """
        Place nodes sitting exactly at the origin on a circle.

        A node whose true coordinate is (0, 0) is indistinguishable from an
        unplaced one and will be moved as well.
        """
        node_count = graph.node_count()
        if node_count == 0:
            return

        angle = 0.0
        angle_step = 2 * math.pi / node_count

        for node in graph.nodes():
            if node.visual.x == 0.0 and node.visual.y == 0.0:
                node.visual.x = INITIAL_RADIUS * math.cos(angle)
                node.visual.y = INITIAL_RADIUS * math.sin(angle)
                angle += angle_step

    def _calculate_forces(self, graph: OntologyGraph, positions: np.ndarray) -> np.ndarray:
        """Net force per node, rows aligned with ``graph.nodes()``."""
        config = self.config
        forces = pairwise_repulsion(positions, config.charge_strength)

        # Node handles are arena indices, so row i is the node with handle i.
        for handle in range(len(positions)):
            for target in graph.successor_handles(handle):
                force = calculate_attraction(
                    positions[handle],
                    positions[target],
                    config.link_distance,
                    config.link_strength,
                )
                forces[handle] += force * self._alpha

        forces += calculate_center_force(
            positions, np.asarray(config.center, dtype=float), config.center_strength
        )
        return forces

    def _apply_forces(self, graph: OntologyGraph, forces: np.ndarray):
        for node, force in zip(graph.nodes(), forces):
            visual = node.visual
            if visual.fixed:
                continue

            velocity = np.array([visual.vx, visual.vy]) + force * self._alpha
            velocity = apply_damping(velocity, self.config.velocity_decay)

            visual.vx, visual.vy = float(velocity[0]), float(velocity[1])
            visual.x += visual.vx
            visual.y += visual.vy

    def initialize(self, graph: OntologyGraph):
        self._initialize_positions(graph)
        self._alpha = self.config.alpha
        self.iteration = 0
        self._initialized = True

    def tick(self, graph: OntologyGraph):
        if self.is_finished():
            return

        self._initialized = True
        positions = np.array(
            [node.visual.position for node in graph.nodes()], dtype=float
        ).reshape(-1, 2)

        forces = self._calculate_forces(graph, positions)
        self._apply_forces(graph, forces)

        self._alpha *= 1.0 - self.config.alpha_decay
        self.iteration += 1

        if self.is_finished():
            logger.debug("Simulation converged after %d ticks (alpha=%.6f)",
                         self.iteration, self._alpha)

    def run(self, graph: OntologyGraph, iterations: int) -> int:
        """
        Initialize the layout and tick until converged or out of iterations.

        Args:
            graph: Graph whose node positions are updated in place
            iterations: Maximum number of ticks

        Returns:
            Number of ticks actually performed
        """
        self.initialize(graph)

        for _ in range(iterations):
            if self.is_finished():
                break
            self.tick(graph)

        logger.info("Layout ran %d/%d ticks on %s, alpha=%.4f",
                    self.iteration, iterations, graph, self._alpha)
        return self.iteration

    def is_finished(self) -> bool:
        return self._alpha < self.config.alpha_min

    def alpha(self) -> float:
        return self._alpha
