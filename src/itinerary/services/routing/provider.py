"""Routing provider contract and factory."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from ...models.domain import Point, TravelMode
from .models import Route
from .ordering import order_stops
from .synthesizer import build_route


class RoutingProvider(ABC):
    """Contract for anything able to order stops and route through them."""

    name: str

    @abstractmethod
    def order_stops(self, origin: Optional[Point], stops: Sequence[Point]) -> list[Point]:
        raise NotImplementedError

    @abstractmethod
    def build_route(self, points: Sequence[Point], mode: TravelMode | str) -> Route:
        raise NotImplementedError


class HeuristicRoutingProvider(RoutingProvider):
    """Greedy ordering plus straight-line synthesis with a fixed speed model."""

    name = "heuristic"

    def order_stops(self, origin: Optional[Point], stops: Sequence[Point]) -> list[Point]:
        return order_stops(origin, stops)

    def build_route(self, points: Sequence[Point], mode: TravelMode | str) -> Route:
        return build_route(points, mode)


def get_provider(name: str) -> RoutingProvider:
    match name:
        case "heuristic":
            return HeuristicRoutingProvider()
        case _:
            raise ValueError(f"Unknown routing provider '{name}'.")
