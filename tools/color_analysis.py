"""Simulated garment color analysis.

No pixels are inspected: after a fixed delay one swatch is drawn from a small
palette. The random source is injectable so callers can seed it.
"""
from __future__ import annotations

import asyncio
import logging
import random
from dataclasses import dataclass
from typing import Optional, Tuple

from models.color_theory import RGB, hex_to_rgb

logger = logging.getLogger(__name__)

PALETTE: Tuple[Tuple[str, str, str], ...] = (
    ("Soft Pink", "F2A6B3", "warm"),
    ("Navy", "1F3A93", "cool"),
    ("Ivory", "F7F3E9", "neutral"),
    ("Olive", "6B8E23", "warm"),
    ("Sky Blue", "A1C8F0", "cool"),
    ("Charcoal", "36454F", "neutral"),
    ("Mustard", "F2C94C", "warm"),
    ("Forest", "228B22", "cool"),
    ("Brown", "8B4513", "warm"),
)


@dataclass(frozen=True)
class AnalysisResult:
    name: str
    color: RGB
    tone: str


class ColorAnalysisEngine:
    """Asynchronous stand-in for image based color extraction."""

    def __init__(self, delay_seconds: float = 0.7, rng: Optional[random.Random] = None) -> None:
        self.delay_seconds = delay_seconds
        self.rng = rng or random.Random()
        self._pending: Optional[asyncio.Task] = None

    async def analyze(self, image: Optional[bytes] = None) -> AnalysisResult:
        """Wait ``delay_seconds`` then return a palette pick; the image is ignored."""

        await asyncio.sleep(self.delay_seconds)
        name, hex_value, tone = self.rng.choice(PALETTE)
        logger.info("Color analysis picked %s (%s)", name, tone)
        return AnalysisResult(name=name, color=hex_to_rgb(hex_value), tone=tone)

    def start(self, image: Optional[bytes] = None) -> asyncio.Task:
        """Schedule an analysis on the running loop, cancelling one still in flight."""

        self.cancel()
        self._pending = asyncio.get_running_loop().create_task(self.analyze(image))
        return self._pending

    def cancel(self) -> bool:
        pending, self._pending = self._pending, None
        if pending is None or pending.done():
            return False
        logger.info("Cancelling in-flight color analysis")
        return pending.cancel()


__all__ = ["AnalysisResult", "ColorAnalysisEngine", "PALETTE"]
