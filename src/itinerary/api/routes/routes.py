"""Itinerary routing endpoints."""

from __future__ import annotations

import logging
from typing import Callable, TypeVar

from fastapi import APIRouter, HTTPException, status
from fastapi.responses import PlainTextResponse

from ...schemas.routing import ItineraryRequest, ItineraryResponse, OrderRequest, OrderResponse
from ...services.routing.service import (
    itinerary_geojson,
    itinerary_steps_csv,
    order_places,
    plan_itinerary,
)

router = APIRouter(prefix="/routes", tags=["routes"])

T = TypeVar("T")


def _run(action: Callable[[], T], description: str) -> T:
    try:
        return action()
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except Exception as exc:
        logging.exception(f"Error {description}: {exc}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed {description}: {str(exc)}",
        ) from exc


@router.post("/itinerary", response_model=ItineraryResponse, status_code=status.HTTP_200_OK)
def itinerary(payload: ItineraryRequest) -> ItineraryResponse:
    return _run(lambda: plan_itinerary(payload), "planning itinerary")


@router.post("/order", response_model=OrderResponse, status_code=status.HTTP_200_OK)
def order(payload: OrderRequest) -> OrderResponse:
    """Order places nearest-first from the origin without building a route."""
    return _run(lambda: order_places(payload), "ordering places")


@router.post("/itinerary/geojson", status_code=status.HTTP_200_OK)
def itinerary_as_geojson(payload: ItineraryRequest) -> dict:
    return _run(lambda: itinerary_geojson(payload), "exporting itinerary as GeoJSON")


@router.post("/itinerary/steps.csv", response_class=PlainTextResponse, status_code=status.HTTP_200_OK)
def itinerary_steps(payload: ItineraryRequest) -> str:
    return _run(lambda: itinerary_steps_csv(payload), "exporting itinerary steps")
