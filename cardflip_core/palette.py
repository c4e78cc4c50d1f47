from __future__ import annotations

import colorsys
from typing import Sequence, Tuple

from .board import PairId

DEFAULT_SYMBOLS: Tuple[str, ...] = (
    "🎮", "🎯", "🎲", "🎪", "🎨", "🎭", "🎬", "🎤", "🎸", "🎹", "🎺", "🎻",
    "⚽", "🏀", "🏈", "⚾", "🎾", "🏐", "🏓", "🏸", "🥊", "🏆", "🥇", "🥈",
    "🌟", "⭐", "✨", "💫", "🌙", "☀️", "🌈", "⚡", "🔥", "💎", "🎊", "🎉",
    "🦄", "🐉", "🦋", "🌸", "🌺", "🌻", "🌷", "🌹", "🍀", "🌿", "🍃", "🌱",
    "🎁", "🎈", "🎀", "💝", "💖", "💕", "💗", "💓", "💘", "💞", "💌", "💐",
)

SATURATION = 0.8
BRIGHTNESS = 0.9


def symbol_for(pair_id: PairId, symbols: Sequence[str] = DEFAULT_SYMBOLS) -> str:
    return symbols[pair_id % len(symbols)]


def hue_for(pair_id: PairId, total_pairs: int) -> float:
    """Spreads hues evenly around the wheel, in degrees."""
    return 360.0 * pair_id / total_pairs


def color_for(pair_id: PairId, total_pairs: int) -> str:
    """Returns the pair's color as '#RRGGBB' at fixed saturation and brightness."""
    r, g, b = colorsys.hsv_to_rgb(hue_for(pair_id, total_pairs) / 360.0, SATURATION, BRIGHTNESS)
    return "#{:02X}{:02X}{:02X}".format(int(r * 255), int(g * 255), int(b * 255))
