"""Configuration loader for hilbert-plot.

Loads and validates a YAML config (``default.yaml`` ships alongside this
module) into typed, frozen dataclasses.  CLI flags override individual
values via ``dataclasses.replace``; validation runs again afterwards.

Usage::

    from hilbert_plot.configs.loader import load_config
    cfg = load_config()                    # default path
    cfg = load_config("/custom/plot.yaml") # explicit path
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from hilbert_plot.patterns import PATTERN_MAP
from hilbert_plot.utils.fs import load_yaml

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent / "default.yaml"


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class ConfigError(Exception):
    """Raised when configuration validation fails."""

    pass


# ---------------------------------------------------------------------------
# Dataclasses -- mirror the YAML structure
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class CanvasConfig:
    """Canvas size in drawing units (becomes the SVG viewBox)."""

    width: float
    height: float


@dataclass(frozen=True)
class CurveConfig:
    """Hilbert recursion depth and which pattern variant to draw."""

    iterations: int
    pattern: str


@dataclass(frozen=True)
class OffsetsConfig:
    """Offset distance for each pattern that draws offset curves."""

    double: float
    wonky: float
    precise: float
    ribbon: float

    def distance_for(self, pattern: str) -> float:
        """Distance for *pattern*; 0.0 for patterns without offsets."""
        return float(getattr(self, pattern, 0.0))


@dataclass(frozen=True)
class StyleConfig:
    stroke: str
    stroke_width: float


@dataclass(frozen=True)
class OutputConfig:
    """Where and under which name SVG files are written."""

    directory: str
    prefix: str
    timestamp_format: str


@dataclass(frozen=True)
class LoggingConfig:
    level: str
    json: bool


@dataclass(frozen=True)
class PlotConfig:
    """Complete configuration loaded from YAML."""

    canvas: CanvasConfig
    curve: CurveConfig
    offsets: OffsetsConfig
    style: StyleConfig
    output: OutputConfig
    logging: LoggingConfig


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
    """Return a mapping section, treating a missing one as empty."""
    section = data.get(name) or {}
    if not isinstance(section, dict):
        raise ConfigError(
            f"Section '{name}' must be a mapping, got {type(section).__name__}"
        )
    return section


def _positive(name: str, value: float) -> None:
    if not math.isfinite(value) or value <= 0:
        raise ConfigError(f"{name} must be > 0, got {value}")


def validate_config(cfg: PlotConfig) -> None:
    """Cross-field checks.  Raises ``ConfigError`` on the first failure."""
    _positive("canvas.width", cfg.canvas.width)
    _positive("canvas.height", cfg.canvas.height)

    if isinstance(cfg.curve.iterations, bool) or not isinstance(
        cfg.curve.iterations, int
    ):
        raise ConfigError(
            f"curve.iterations must be an integer, got {cfg.curve.iterations!r}"
        )
    if cfg.curve.iterations < 0:
        raise ConfigError(
            f"curve.iterations must be >= 0, got {cfg.curve.iterations}"
        )
    if cfg.curve.pattern not in PATTERN_MAP:
        raise ConfigError(
            f"Unknown curve.pattern '{cfg.curve.pattern}'. "
            f"Available: {list(PATTERN_MAP)}"
        )

    for name in ("double", "wonky", "precise", "ribbon"):
        value = getattr(cfg.offsets, name)
        if not math.isfinite(value):
            raise ConfigError(f"offsets.{name} must be finite, got {value}")

    _positive("style.stroke_width", cfg.style.stroke_width)
    if not isinstance(cfg.style.stroke, str) or not cfg.style.stroke:
        raise ConfigError(
            f"style.stroke must be a non-empty colour string, got {cfg.style.stroke!r}"
        )

    if not cfg.output.prefix:
        raise ConfigError("output.prefix must be non-empty")
    if not cfg.output.directory:
        raise ConfigError("output.directory must be non-empty")

    if not isinstance(logging.getLevelName(cfg.logging.level.upper()), int):
        raise ConfigError(f"Unknown logging.level '{cfg.logging.level}'")
    if not isinstance(cfg.logging.json, bool):
        raise ConfigError(
            f"logging.json must be a boolean, got {cfg.logging.json!r}"
        )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def load_config(path: str | Path | None = None) -> PlotConfig:
    """Load and validate configuration from YAML.

    Parameters
    ----------
    path : str | Path | None
        Path to a config file.  ``None`` loads the default shipped
        alongside this module.

    Returns
    -------
    PlotConfig
        Fully validated, frozen configuration object.

    Raises
    ------
    ConfigError
        If the file is empty, is not valid YAML, or any field is
        missing or invalid.
    FileNotFoundError
        If *path* does not exist.
    """
    path = DEFAULT_CONFIG_PATH if path is None else Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    logger.debug("Loading configuration from %s", path)

    try:
        data: dict[str, Any] = load_yaml(path)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc
    if data is None:
        raise ConfigError(f"Empty configuration file: {path}")
    if not isinstance(data, dict):
        raise ConfigError(f"Configuration root must be a mapping: {path}")

    try:
        cv = _section(data, "canvas")
        canvas = CanvasConfig(
            width=float(cv["width"]),
            height=float(cv["height"]),
        )

        cu = _section(data, "curve")
        iterations = cu.get("iterations", 5)
        if isinstance(iterations, float) and iterations.is_integer():
            iterations = int(iterations)
        curve = CurveConfig(
            iterations=iterations,
            pattern=str(cu.get("pattern", "plain")),
        )

        of = _section(data, "offsets")
        offsets = OffsetsConfig(
            double=float(of.get("double", 0.5)),
            wonky=float(of.get("wonky", 2.0)),
            precise=float(of.get("precise", 0.5)),
            ribbon=float(of.get("ribbon", 0.5)),
        )

        st = _section(data, "style")
        style = StyleConfig(
            stroke=st.get("stroke", "black"),
            stroke_width=float(st.get("stroke_width", 1.0)),
        )

        out = _section(data, "output")
        output = OutputConfig(
            directory=str(out.get("directory", "output")),
            prefix=str(out.get("prefix", "output")),
            timestamp_format=str(
                out.get("timestamp_format", "%Y-%m-%d_%H-%M-%S")
            ),
        )

        lg = _section(data, "logging")
        logging_cfg = LoggingConfig(
            level=str(lg.get("level", "INFO")),
            json=lg.get("json", False),
        )

        config = PlotConfig(
            canvas=canvas,
            curve=curve,
            offsets=offsets,
            style=style,
            output=output,
            logging=logging_cfg,
        )

    except KeyError as exc:
        raise ConfigError(
            f"Missing required configuration key: {exc}"
        ) from exc
    except (TypeError, ValueError) as exc:
        raise ConfigError(
            f"Invalid configuration value: {exc}"
        ) from exc

    validate_config(config)
    logger.debug("Configuration loaded successfully")
    return config
