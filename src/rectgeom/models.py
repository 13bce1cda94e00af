"""Dataclasses describing offset amounts and placement options for rectgeom."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from typing import Any, Dict, Mapping, Optional

from .primitives import Point
from .utils.coerce import as_number, as_point


def _amount(data: Mapping[str, Any], key: str) -> float:
    value = as_number(data.get(key))
    return 0.0 if value is None else value


@dataclass(frozen=True)
class Offsets:
    """Per-side offset amounts.

    Positive ``left``/``bottom`` values move those edges inward, positive
    ``top``/``right`` values move those edges outward (y-up coordinates).
    """

    left: float = 0.0
    top: float = 0.0
    right: float = 0.0
    bottom: float = 0.0

    @staticmethod
    def uniform(amount: float) -> "Offsets":
        return Offsets(amount, amount, amount, amount)

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)

    @staticmethod
    def from_dict(data: Mapping[str, Any]) -> "Offsets":
        return Offsets(
            left=_amount(data, "left"),
            top=_amount(data, "top"),
            right=_amount(data, "right"),
            bottom=_amount(data, "bottom"),
        )


@dataclass
class PlacementOptions:
    """Options shared by the item placement helpers."""

    amount: float = 0.0  # gap used by offset_from
    consider_stroke: bool = False  # visible bounds instead of geometric
    from_point: Optional[Point] = None  # move origin, defaults to top-left

    def __post_init__(self) -> None:
        # Accept any point-like; unreadable points fall back to the default.
        if self.from_point is not None:
            self.from_point = as_point(self.from_point)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        if self.from_point is not None:
            data["from_point"] = [self.from_point.x, self.from_point.y]
        return data

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2)

    @staticmethod
    def from_dict(data: Mapping[str, Any]) -> "PlacementOptions":
        raw_point = data.get("from_point")
        return PlacementOptions(
            amount=_amount(data, "amount"),
            consider_stroke=bool(data.get("consider_stroke", False)),
            from_point=as_point(raw_point) if raw_point is not None else None,
        )

    @staticmethod
    def from_json(text: str) -> "PlacementOptions":
        data: Dict = json.loads(text)
        return PlacementOptions.from_dict(data)


__all__ = ["Offsets", "PlacementOptions"]
