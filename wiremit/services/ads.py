from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Dict, Tuple


@dataclass(frozen=True)
class Ad:
    id: int
    image_url: str
    title: str
    description: str

    def as_dict(self) -> Dict[str, object]:
        return asdict(self)


ADS: Tuple[Ad, ...] = (
    Ad(
        id=1,
        image_url="https://images.unsplash.com/photo-1556742049-0cfed4f6a45d?w=400&h=150&fit=crop",
        title="Premium Banking Services",
        description="Secure international transfers with competitive rates.",
    ),
    Ad(
        id=2,
        image_url="https://images.unsplash.com/photo-1556740738-b6a63e27c4df?w=400&h=150&fit=crop",
        title="Student Discounts",
        description="Special rates for educational expenses abroad.",
    ),
    Ad(
        id=3,
        image_url="https://images.unsplash.com/photo-1554224155-8d04cb21cd6c?w=400&h=150&fit=crop",
        title="Mobile Banking App",
        description="Send money on-the-go with our mobile app.",
    ),
)


def next_ad_index(current: int, count: int = len(ADS)) -> int:
    if count <= 0:
        raise ValueError("no ads to rotate")
    return (current + 1) % count


def ad_index_at(elapsed_seconds: float, rotation_seconds: int, count: int = len(ADS)) -> int:
    """Index of the ad on screen ``elapsed_seconds`` after the carousel started."""
    if rotation_seconds <= 0:
        raise ValueError("rotation_seconds must be positive")
    if count <= 0:
        raise ValueError("no ads to rotate")
    ticks = int(max(elapsed_seconds, 0) // rotation_seconds)
    return ticks % count
