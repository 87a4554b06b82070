"""Environment-based configuration for the barrier demo."""

from pydantic import (
    BaseModel,
    Field,
    NonNegativeInt,
    PositiveFloat,
    PositiveInt,
    model_validator,
)
from pydantic_settings import BaseSettings, SettingsConfigDict

from barrier_demo.geometry import Colors


class BarrierSpec(BaseModel):
    """Where the barrier line is drawn and how it looks."""

    x: float = 1
    y: float = 210
    width: float = 240
    height: float = 2  # thickness of the line
    color: str = Colors.BLACK


class BarSpec(BaseModel):
    """
    Layout of each bar.

    offset moves every bar away from the top-left corner, which keeps thick
    outlines on the surface.
    """

    offset: float = 10
    width: float = 20
    height: float = 300
    separation: float = 30  # gap between neighbouring bars
    empty_color: str = Colors.GREY
    full_color: str = Colors.GREEN
    stroke_color: str = Colors.BLACK
    wait_color: str = Colors.RED  # filled portion while blocked
    stroke_width: float = 2
    barrier_at: float = 200  # fill level the barrier line marks


class PhaseOneConfig(BaseModel):
    has_barrier: bool = True
    max_fill: PositiveInt = 200


class PhaseTwoConfig(BaseModel):
    has_barrier: bool = False
    max_fill: PositiveInt = 300
    pause_ms: NonNegativeInt = 200  # delay between phase one finishing and phase two starting


class CanvasSpec(BaseModel):
    """Size of the terminal canvas and how many pixels one cell covers."""

    width: PositiveFloat = 270
    height: PositiveFloat = 330
    cell_width: PositiveFloat = 5
    cell_height: PositiveFloat = 10


class DemoSettings(BaseSettings):
    """Barrier demo configuration.

    All settings can be overridden via environment variables with the
    BARRIER_DEMO_ prefix; nested fields use a double underscore. For example:
        BARRIER_DEMO_RATE_MS=50
        BARRIER_DEMO_PHASE_TWO__MAX_FILL=280
    """

    # Surface lookup
    canvas_node: str = "demo"

    # Scheduling
    size_increment: PositiveInt = 10  # fill added to one bar per tick
    rate_ms: PositiveInt = 100  # time between ticks
    number: PositiveInt = 5  # bars in the demo

    barrier: BarrierSpec = Field(default_factory=BarrierSpec)
    bar: BarSpec = Field(default_factory=BarSpec)
    phase_one: PhaseOneConfig = Field(default_factory=PhaseOneConfig)
    phase_two: PhaseTwoConfig = Field(default_factory=PhaseTwoConfig)
    canvas: CanvasSpec = Field(default_factory=CanvasSpec)

    model_config = SettingsConfigDict(
        env_prefix="BARRIER_DEMO_",
        env_nested_delimiter="__",
    )

    @model_validator(mode="after")
    def _phase_two_not_below_phase_one(self) -> "DemoSettings":
        # Bars carry their phase one fill into phase two.
        if self.phase_two.max_fill < self.phase_one.max_fill:
            raise ValueError(
                f"phase_two.max_fill ({self.phase_two.max_fill}) must not be "
                f"below phase_one.max_fill ({self.phase_one.max_fill})"
            )
        return self

    @property
    def rate_seconds(self) -> float:
        return self.rate_ms / 1000

    @property
    def pause_seconds(self) -> float:
        return self.phase_two.pause_ms / 1000
