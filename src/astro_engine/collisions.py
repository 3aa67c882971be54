from __future__ import annotations

from typing import Sequence

from .forces import Body


def are_colliding(body1: Body, body2: Body) -> bool:
    """True when the spheres touch or overlap (boundary inclusive)."""
    distance = body1.position.distance_to(body2.position)
    return distance <= (body1.radius + body2.radius)


def find_collisions(bodies: Sequence[Body]) -> list[tuple[str, str]]:
    """All colliding unordered pairs as (id_i, id_j) with i < j. No response is applied."""
    out = []
    n = len(bodies)
    for i in range(n):
        for j in range(i+1, n):
            if are_colliding(bodies[i], bodies[j]):
                out.append((bodies[i].id, bodies[j].id))
    return out
