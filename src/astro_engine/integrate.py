from __future__ import annotations

from .forces import Body


def update_body_euler(body: Body, force, dt: float) -> None:
    """Advance one body by dt in place (semi-implicit Euler).

    Velocity is updated first and the *new* velocity moves the position.
    Raises ZeroDivisionError for a zero-mass body.
    """
    acceleration = force.div(body.mass)
    body.velocity = body.velocity.add(acceleration.mul(dt))
    body.position = body.position.add(body.velocity.mul(dt))
