"""Relógio injetável (epoch segundos) para TTLs e janelas de replay."""

from __future__ import annotations

import time
from collections.abc import Callable

Clock = Callable[[], float]

system_clock: Clock = time.time
