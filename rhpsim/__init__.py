"""Simulation parameters, areas, data items and data-owner selection for partitioned ad hoc network simulations."""

__version__ = "0.1.0"