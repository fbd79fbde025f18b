"""Kinematic robot and vehicle models, state propagation and simple controllers."""

__version__ = "0.1.0"