"""Wheel API endpoints: segments, session and spins."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import APIRouter, HTTPException, Request, status

from spin_wheel.api.schemas import (
    MessageOut,
    RotationRequest,
    SegmentCreate,
    SegmentLayoutOut,
    SegmentOut,
    SessionOut,
    SessionUpdate,
    SpinOut,
    SpinRequest,
)
from spin_wheel.domain.errors import (
    EmptyWheelError,
    InvalidSessionUpdateError,
    NotEnoughSegmentsError,
    SegmentLimitError,
)

if TYPE_CHECKING:
    from spin_wheel.containers import AppContainer

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["wheel"])


def _container(request: Request) -> AppContainer:
    return request.app.state.container


@router.get("/segments")
async def list_segments(request: Request) -> list[SegmentOut]:
    """Return all segments in wheel order."""
    segments = _container(request).segment_service.list_segments()
    return [SegmentOut.from_domain(segment) for segment in segments]


@router.post("/segments", status_code=status.HTTP_201_CREATED)
async def create_segment(payload: SegmentCreate, request: Request) -> SegmentOut:
    """Add a segment to the wheel."""
    try:
        segment = _container(request).segment_service.add_segment(
            label=payload.label, color=payload.color, order=payload.order
        )
    except SegmentLimitError as exc:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT, detail=str(exc)
        ) from exc
    return SegmentOut.from_domain(segment)


@router.delete("/segments/{segment_id}")
async def delete_segment(segment_id: str, request: Request) -> MessageOut:
    """Remove one segment; unknown ids succeed without change."""
    if not (segment_id.isascii() and segment_id.isdigit()):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid segment ID"
        )
    try:
        _container(request).segment_service.remove_segment(int(segment_id))
    except SegmentLimitError as exc:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT, detail=str(exc)
        ) from exc
    return MessageOut(message="Segment deleted successfully")


@router.delete("/segments")
async def delete_all_segments(request: Request) -> MessageOut:
    """Remove every segment and restart segment ids."""
    _container(request).segment_service.reset()
    logger.info("Wheel reset")
    return MessageOut(message="All segments deleted successfully")


@router.get("/session")
async def get_session(request: Request) -> SessionOut:
    """Return the wheel session."""
    session = _container(request).session_service.get_session()
    if session is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="No session found"
        )
    return SessionOut.from_domain(session)


@router.patch("/session")
async def update_session(payload: SessionUpdate, request: Request) -> SessionOut:
    """Merge the given fields into the session, creating it if needed."""
    fields = payload.model_dump(exclude_unset=True)
    try:
        session = _container(request).session_service.update_session(fields)
    except InvalidSessionUpdateError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
        ) from exc
    return SessionOut.from_domain(session)


@router.post("/session/spin")
async def increment_spin_count(request: Request) -> SessionOut:
    """Count one spin completed by the client."""
    session = _container(request).session_service.record_spin()
    return SessionOut.from_domain(session)


@router.get("/wheel/layout")
async def wheel_layout(request: Request) -> list[SegmentLayoutOut]:
    """Return each segment with its start angle and arc width."""
    layout = _container(request).segment_service.layout()
    return [SegmentLayoutOut.from_domain(entry) for entry in layout]


@router.post("/wheel/resolve")
async def resolve_rotation(payload: RotationRequest, request: Request) -> SegmentOut:
    """Return the segment under the pointer for a rotation."""
    try:
        segment = _container(request).spin_service.resolve(payload.rotation)
    except EmptyWheelError as exc:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT, detail=str(exc)
        ) from exc
    return SegmentOut.from_domain(segment)


@router.post("/wheel/spin")
async def spin_wheel(request: Request, payload: SpinRequest | None = None) -> SpinOut:
    """Spin the wheel, count the spin and return the winner."""
    current_rotation = payload.current_rotation if payload else 0.0
    try:
        result = _container(request).spin_service.spin(current_rotation)
    except NotEnoughSegmentsError as exc:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT, detail=str(exc)
        ) from exc
    logger.info(
        "Spin landed on %s",
        result.segment.label,
        extra={
            "rotation": result.rotation,
            "total_spins": result.session.total_spins,
        },
    )
    return SpinOut.from_domain(result)
