"""Pydantic request and response models for the wheel API."""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from spin_wheel.domain.models import Segment, SegmentLayout, SpinResult, WheelSession


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SegmentCreate(_CamelModel):
    """Payload for adding a segment."""

    model_config = ConfigDict(str_strip_whitespace=True)

    label: str = Field(min_length=1)
    color: str | None = Field(default=None, min_length=1)
    order: int | None = None


class SessionUpdate(_CamelModel):
    """Partial session update; omitted fields are left untouched.

    Values are validated strictly: ``"off"`` is not a bool, ``true`` is not a
    count, and an explicit ``null`` is rejected rather than ignored.
    """

    model_config = ConfigDict(extra="forbid", strict=True)

    total_spins: int | None = Field(default=None, ge=0)
    sound_enabled: bool | None = None

    @field_validator("total_spins", "sound_enabled", mode="before")
    @classmethod
    def _reject_null(cls, value: object) -> object:
        if value is None:
            raise ValueError("must not be null")
        return value


class RotationRequest(_CamelModel):
    """Rotation to resolve against the current wheel."""

    rotation: float = Field(allow_inf_nan=False)


class SpinRequest(_CamelModel):
    """Cumulative rotation the wheel is resting at before the spin."""

    current_rotation: float = Field(default=0.0, allow_inf_nan=False)


class SegmentOut(_CamelModel):
    """Segment as returned to clients."""

    id: int
    label: str
    color: str
    order: int

    @classmethod
    def from_domain(cls, segment: Segment) -> "SegmentOut":
        return cls(
            id=segment.id, label=segment.label, color=segment.color, order=segment.order
        )


class SessionOut(_CamelModel):
    """Session as returned to clients."""

    id: int
    total_spins: int
    sound_enabled: bool

    @classmethod
    def from_domain(cls, session: WheelSession) -> "SessionOut":
        return cls(
            id=session.id,
            total_spins=session.total_spins,
            sound_enabled=session.sound_enabled,
        )


class SegmentLayoutOut(_CamelModel):
    """Segment with its start angle and arc width in degrees."""

    segment: SegmentOut
    start_angle: float
    arc: float

    @classmethod
    def from_domain(cls, layout: SegmentLayout) -> "SegmentLayoutOut":
        return cls(
            segment=SegmentOut.from_domain(layout.segment),
            start_angle=layout.start_angle,
            arc=layout.arc,
        )


class SpinOut(_CamelModel):
    """Result of a server-side spin."""

    rotation: float
    segment: SegmentOut
    session: SessionOut

    @classmethod
    def from_domain(cls, result: SpinResult) -> "SpinOut":
        return cls(
            rotation=result.rotation,
            segment=SegmentOut.from_domain(result.segment),
            session=SessionOut.from_domain(result.session),
        )


class MessageOut(BaseModel):
    """Confirmation message."""

    message: str
