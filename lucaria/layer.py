"""Collision group bits and kinematic layers."""

from __future__ import annotations

from enum import IntFlag

GROUP_KINEMATIC_RIGIDBODY = 1 << 0
GROUP_DYNAMIC_RIGIDBODY = 1 << 1
GROUP_COLLIDER_GROUND = 1 << 2
GROUP_COLLIDER_WALL = 1 << 3
GROUP_COLLIDER_LAYER_0 = 1 << 4
GROUP_COLLIDER_LAYER_1 = 1 << 5
GROUP_COLLIDER_LAYER_2 = 1 << 6
GROUP_COLLIDER_LAYER_3 = 1 << 7
GROUP_COLLIDER_LAYER_4 = 1 << 8
GROUP_COLLIDER_LAYER_5 = 1 << 9
GROUP_COLLIDER_LAYER_6 = 1 << 10
GROUP_COLLIDER_LAYER_7 = 1 << 11


class KinematicLayer(IntFlag):
    """Collision layers that kinematic bodies may interact with."""

    LAYER_0 = GROUP_COLLIDER_LAYER_0
    LAYER_1 = GROUP_COLLIDER_LAYER_1
    LAYER_2 = GROUP_COLLIDER_LAYER_2
    LAYER_3 = GROUP_COLLIDER_LAYER_3
    LAYER_4 = GROUP_COLLIDER_LAYER_4
    LAYER_5 = GROUP_COLLIDER_LAYER_5
    LAYER_6 = GROUP_COLLIDER_LAYER_6
    LAYER_7 = GROUP_COLLIDER_LAYER_7


def contains_layer(containing: int, contained: int) -> bool:
    """Return True when every bit of ``contained`` is set in ``containing``."""
    return (int(containing) & int(contained)) == int(contained)


def remove_layer(containing: int, to_remove: int) -> int:
    """Clear the bits of ``to_remove`` from ``containing``."""
    return int(containing) & ~int(to_remove)