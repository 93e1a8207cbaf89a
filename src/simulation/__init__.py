"""Simulation primitives for liftscan."""

from .building import Building
from .car import Car
from .clock import Ticker
from .config import SimulationConfig
from .simulation import Simulation

__all__ = [
    "Building",
    "Car",
    "SimulationConfig",
    "Simulation",
    "Ticker",
]
