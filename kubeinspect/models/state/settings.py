"""Inspector settings model."""

from pydantic import BaseModel, ConfigDict, Field, model_validator

from kubeinspect.constants.defaults import (
    DEFAULT_EXPANDED_DEFAULT,
    LOG_LEVEL_DEFAULT,
    MAX_NAVIGATION_DEPTH_DEFAULT,
    MAX_SUBTITLE_LINES_DEFAULT,
    THEME_DEFAULT,
    UTILIZATION_ERROR_THRESHOLD_DEFAULT,
    UTILIZATION_WARNING_THRESHOLD_DEFAULT,
)
from kubeinspect.constants.limits import (
    MAX_NAVIGATION_DEPTH_MAX,
    MAX_NAVIGATION_DEPTH_MIN,
    MAX_SUBTITLE_LINES_MAX,
    MAX_SUBTITLE_LINES_MIN,
)


class InspectorSettings(BaseModel):
    """Inspector settings model with validation."""

    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)

    # UI preferences
    theme: str = THEME_DEFAULT
    log_level: str = LOG_LEVEL_DEFAULT
    log_file: str = ""

    # Property tree
    max_subtitle_lines: int = Field(
        default=MAX_SUBTITLE_LINES_DEFAULT,
        ge=MAX_SUBTITLE_LINES_MIN,
        le=MAX_SUBTITLE_LINES_MAX,
    )
    default_expanded: bool = DEFAULT_EXPANDED_DEFAULT

    # Utilization bar offsets (fractions of the reference quantity)
    utilization_warning_threshold: float = Field(
        default=UTILIZATION_WARNING_THRESHOLD_DEFAULT, gt=0.0
    )
    utilization_error_threshold: float = Field(
        default=UTILIZATION_ERROR_THRESHOLD_DEFAULT, gt=0.0
    )

    # Navigation
    max_navigation_depth: int = Field(
        default=MAX_NAVIGATION_DEPTH_DEFAULT,
        ge=MAX_NAVIGATION_DEPTH_MIN,
        le=MAX_NAVIGATION_DEPTH_MAX,
    )

    @model_validator(mode="after")
    def _check_thresholds(self) -> "InspectorSettings":
        if self.utilization_warning_threshold > self.utilization_error_threshold:
            raise ValueError(
                "utilization_warning_threshold must not exceed utilization_error_threshold"
            )
        return self
