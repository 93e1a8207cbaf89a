from __future__ import annotations

from typing import Dict, Type

from .board import RequestBoard
from .car import CarState
from .direction import CarMode, Direction, DirectionSet
from .interface import Dispatcher, TickResult
from .scan import ScanDispatcher
from .sweep import SweepDispatcher

__all__ = [
    "CarMode",
    "CarState",
    "Direction",
    "DirectionSet",
    "Dispatcher",
    "RequestBoard",
    "ScanDispatcher",
    "SweepDispatcher",
    "TickResult",
    "DISPATCHER_REGISTRY",
    "get_dispatcher",
]


DISPATCHER_REGISTRY: Dict[str, Type[Dispatcher]] = {
    "scan": ScanDispatcher,
    "sweep": SweepDispatcher,
}


def get_dispatcher(name: str, **kwargs) -> Dispatcher:
    cls = DISPATCHER_REGISTRY.get(name.lower())
    if cls is None:
        raise ValueError(f"Unknown dispatcher '{name}'. Available: {', '.join(DISPATCHER_REGISTRY)}")
    return cls(**kwargs)
