"""Structured logging utilities for the distance-graph driver.

Invariants
- Idempotent handler installation per logger.
- Metric values (and step, if provided) must be finite floats.

Public API
- get_logger(name="distance_graph", level=logging.INFO) -> logging.Logger
- log_metric(name, value, step=None, logger=None) -> None
- log_metrics(metrics: dict[str, float], step=None, logger=None) -> None
"""
from __future__ import annotations

import logging
import math
from typing import Mapping

LOGGER_NAME = "distance_graph"


def get_logger(name: str = LOGGER_NAME, level: int = logging.INFO) -> logging.Logger:
    """
    Return a configured logger with concise formatter.

    Idempotent: installs at most one StreamHandler marked by _distance_graph_handler.
    Calling again with a different level updates both logger and handler.
    """
    logger = logging.getLogger(name)
    logger.setLevel(int(level))
    logger.propagate = False

    handler = next(
        (h for h in logger.handlers if getattr(h, "_distance_graph_handler", False)), None
    )
    if handler is None:
        handler = logging.StreamHandler()
        handler._distance_graph_handler = True  # type: ignore[attr-defined]
        handler.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s %(name)s %(levelname)s: %(message)s",
                datefmt="%H:%M:%S",
            )
        )
        logger.addHandler(handler)
    handler.setLevel(int(level))
    return logger


def _ensure_finite_float(x: object, name: str) -> float:
    try:
        val = float(x)  # type: ignore[arg-type]
    except (TypeError, ValueError) as e:
        raise TypeError(f"{name} must be a real number convertible to float") from e
    if not math.isfinite(val):
        raise ValueError(f"{name} must be finite, got {val}")
    return val


def _format_float(x: float) -> str:
    return f"{x:.10g}"


def _step_suffix(step: int | None) -> str:
    if step is None:
        return ""
    s = _ensure_finite_float(step, "step")
    return f" step={int(s)}"


def log_metric(
    name: str,
    value: float,
    step: int | None = None,
    logger: logging.Logger | None = None,
) -> None:
    """Log a single metric as: "metric name=value step=step"."""
    if not isinstance(name, str) or not name:
        raise ValueError("name must be a non-empty string")
    v = _ensure_finite_float(value, "value")
    lg = logger if logger is not None else get_logger()
    lg.info(f"metric {name}={_format_float(v)}{_step_suffix(step)}")


def log_metrics(
    metrics: Mapping[str, float],
    step: int | None = None,
    logger: logging.Logger | None = None,
) -> None:
    """
    Log a mapping of metrics as: "metrics k1=v1 k2=v2 ... step=step".

    Keys are sorted for deterministic ordering.
    """
    if not isinstance(metrics, Mapping) or len(metrics) == 0:
        raise ValueError("metrics must be a non-empty mapping of str->float")
    parts: list[str] = []
    for k in sorted(metrics.keys()):
        if not isinstance(k, str) or not k:
            raise ValueError("metric keys must be non-empty strings")
        v = _ensure_finite_float(metrics[k], f"value for '{k}'")
        parts.append(f"{k}={_format_float(v)}")
    lg = logger if logger is not None else get_logger()
    lg.info("metrics " + " ".join(parts) + _step_suffix(step))


__all__ = ["LOGGER_NAME", "get_logger", "log_metric", "log_metrics"]
