"""
Force calculations for the force-directed layout.

Positions and forces are numpy arrays of shape (2,), or (n, 2) for the
all-pairs repulsion.
"""

import numpy as np

# Squared distance below which two nodes count as coincident.
MIN_DISTANCE_SQ = 1e-4
# Lower bound on the link length used by the spring force.
MIN_LINK_DISTANCE = 0.1
PERTURBATION_SCALE = 0.01


def _normalize(vector: np.ndarray) -> np.ndarray:
    norm = np.linalg.norm(vector)
    if norm == 0.0:
        return np.zeros_like(vector)
    return vector / norm


def coincident_perturbation(pos1: np.ndarray, pos2: np.ndarray) -> np.ndarray:
    """Small deterministic offset used in place of repulsion for coincident nodes."""
    return np.array([
        np.sin((pos1[0] + pos2[0]) * 7.0) * PERTURBATION_SCALE,
        np.cos((pos1[1] + pos2[1]) * 11.0) * PERTURBATION_SCALE,
    ])


def calculate_repulsion(pos1: np.ndarray, pos2: np.ndarray, strength: float) -> np.ndarray:
    """
    Inverse-square charge force acting on node 1 from node 2.

    Args:
        pos1: Position of the node the force acts on
        pos2: Position of the other node
        strength: Charge strength; negative pushes node 1 away from node 2

    Returns:
        Force vector of magnitude |strength| / distance^2. Coincident nodes
        get a small deterministic perturbation instead, so the result is
        always finite.
    """
    pos1 = np.asarray(pos1, dtype=float)
    pos2 = np.asarray(pos2, dtype=float)
    delta = pos1 - pos2
    distance_sq = float(delta @ delta)

    if distance_sq < MIN_DISTANCE_SQ:
        return coincident_perturbation(pos1, pos2)

    return _normalize(delta) * (-strength / distance_sq)


def pairwise_repulsion(positions: np.ndarray, strength: float) -> np.ndarray:
    """
    Net repulsion on every node from every other node.

    Each unordered pair contributes ``f = calculate_repulsion(p_i, p_j)`` to
    node i and ``-f`` to node j (i < j), so coincident pairs are pushed in
    opposite directions.

    Args:
        positions: Array of shape (n, 2)
        strength: Charge strength

    Returns:
        Array of shape (n, 2) with the summed force per node
    """
    positions = np.asarray(positions, dtype=float)
    delta = positions[:, None, :] - positions[None, :, :]
    distance_sq = np.einsum('ijk,ijk->ij', delta, delta)
    near = distance_sq < MIN_DISTANCE_SQ

    scale = np.zeros_like(distance_sq)
    np.divide(-strength, distance_sq ** 1.5, out=scale, where=~near)
    contributions = delta * scale[..., None]

    if near.any():
        pair_sum = positions[:, None, :] + positions[None, :, :]
        perturbation = np.stack([
            np.sin(pair_sum[..., 0] * 7.0) * PERTURBATION_SCALE,
            np.cos(pair_sum[..., 1] * 11.0) * PERTURBATION_SCALE,
        ], axis=-1)
        upper = np.triu(near, k=1)
        lower = np.tril(near, k=-1)
        contributions[upper] = perturbation[upper]
        contributions[lower] = -perturbation[lower]

    return contributions.sum(axis=1)


def calculate_attraction(pos1: np.ndarray,
                         pos2: np.ndarray,
                         target_distance: float,
                         strength: float) -> np.ndarray:
    """
    Spring force pulling node 1 toward node 2.

    Pulls when the nodes are farther apart than ``target_distance`` and
    pushes when closer. Coincident positions yield a zero vector.
    """
    delta = np.asarray(pos2, dtype=float) - np.asarray(pos1, dtype=float)
    distance = max(np.linalg.norm(delta), MIN_LINK_DISTANCE)

    displacement = distance - target_distance
    return _normalize(delta) * (displacement * strength)


def calculate_center_force(pos: np.ndarray, center: np.ndarray, strength: float) -> np.ndarray:
    """Linear pull toward ``center``."""
    return (np.asarray(center, dtype=float) - np.asarray(pos, dtype=float)) * strength


def apply_damping(velocity: np.ndarray, damping: float) -> np.ndarray:
    return np.asarray(velocity, dtype=float) * damping
