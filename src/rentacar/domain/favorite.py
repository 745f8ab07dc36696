from __future__ import annotations

from dataclasses import dataclass, field

from rentacar.domain.car import Car


@dataclass(frozen=True, slots=True)
class Favorite:
    user_id: str
    car_id: str
    car: Car | None = field(default=None, compare=False)
