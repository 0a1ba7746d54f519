"""Plot configuration loading and validation."""

from hilbert_plot.configs.loader import (
    CanvasConfig,
    ConfigError,
    CurveConfig,
    LoggingConfig,
    OffsetsConfig,
    OutputConfig,
    PlotConfig,
    StyleConfig,
    load_config,
    validate_config,
)

__all__ = [
    "CanvasConfig",
    "ConfigError",
    "CurveConfig",
    "LoggingConfig",
    "OffsetsConfig",
    "OutputConfig",
    "PlotConfig",
    "StyleConfig",
    "load_config",
    "validate_config",
]
