"""Logging utilities for Audiomark."""

import logging
import time
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path

import structlog


@dataclass
class RenderStats:
    """Statistics from a render run."""

    symbols_drawn: int = 0
    shapes_drawn: int = 0
    captions_drawn: int = 0
    missing_glyphs: int = 0
    colors: Counter[str] = field(default_factory=Counter)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate render duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "INFO",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("audiomark")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class RenderLogger:
    """Logger for tracking draw calls and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None) -> None:
        self._logger = logger if logger is not None else structlog.get_logger("audiomark")
        self._stats = RenderStats()

    def start(self) -> None:
        """Mark the start of a render run."""
        self._stats.start_time = time.time()

    def finish(self) -> None:
        """Mark the end of a render run."""
        self._stats.end_time = time.time()
        self._logger.info(
            "Render complete",
            symbols=self._stats.symbols_drawn,
            shapes=self._stats.shapes_drawn,
            captions=self._stats.captions_drawn,
            duration_ms=round(self._stats.duration_seconds * 1000, 2),
        )

    def log_symbol(self, symbol: str, strategy: str, color: str, paths: int) -> None:
        """Log one rendered symbol."""
        self._logger.debug(
            "Symbol drawn",
            symbol=symbol,
            strategy=strategy,
            color=color,
            paths=paths,
        )
        self._stats.symbols_drawn += 1
        self._stats.colors[color] += 1

    def log_shape(self, paths: int) -> None:
        """Log an outline shape drawn outside the symbol catalog."""
        self._logger.debug("Shape drawn", paths=paths)
        self._stats.shapes_drawn += 1

    def log_caption(self, caption: str, missing: tuple[str, ...]) -> None:
        """Log a placed caption, warning when glyphs were missing."""
        if missing:
            self._logger.warning(
                "Caption centred with missing glyphs",
                caption=caption,
                missing="".join(missing),
            )
            self._stats.missing_glyphs += len(missing)
        else:
            self._logger.debug("Caption drawn", caption=caption)
        self._stats.captions_drawn += 1

    @property
    def stats(self) -> RenderStats:
        """Get current render statistics."""
        return self._stats
