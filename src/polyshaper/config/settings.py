"""Configuration settings for Polyshaper."""

from pathlib import Path

from pydantic import BaseModel, Field

from polyshaper.domain.enums import FillRule

DEFAULT_SCALE = 1024.0


class ClipperConfig(BaseModel):
    """Configuration for the boolean-combination engine.

    Coordinates are quantized onto an integer lattice of ``1 / scale`` units
    before clipping. A larger scale gives finer precision at the cost of
    coordinate range.
    """

    scale: float = Field(
        default=DEFAULT_SCALE,
        gt=0.0,
        description="Lattice points per coordinate unit",
    )
    fill_rule: FillRule = Field(
        default=FillRule.EVEN_ODD,
        description="Fill rule used by pairwise boolean combination",
    )
    merge_fill_rule: FillRule = Field(
        default=FillRule.NON_ZERO,
        description="Default fill rule used when merging polygons",
    )

    def max_error(self) -> float:
        """Largest per-axis displacement a vertex can suffer from quantization."""
        return 0.5 / self.scale


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class PolyshaperSettings(BaseModel):
    """Main application settings."""

    clipper: ClipperConfig = Field(default_factory=ClipperConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    random_seed: int | None = Field(
        default=None,
        description="Seed for the shared random source (None = nondeterministic)",
    )


def get_default_settings() -> PolyshaperSettings:
    """Get default application settings."""
    return PolyshaperSettings()
