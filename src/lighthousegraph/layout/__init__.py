"""Force-directed layout for dependency graphs."""

from lighthousegraph.layout.engine import ForceLayoutEngine
from lighthousegraph.layout.forces import AxisForce, Force, LinkForce, ManyBodyForce
from lighthousegraph.layout.scheduler import TickLoop

__all__ = [
    "ForceLayoutEngine",
    "Force",
    "LinkForce",
    "ManyBodyForce",
    "AxisForce",
    "TickLoop",
]
