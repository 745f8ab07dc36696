from __future__ import annotations

from dataclasses import dataclass

from rentacar.domain.errors import ValidationError


@dataclass(frozen=True, slots=True)
class Location:
    id: str
    name: str
    city: str
    address: str = ""
    phone: str | None = None

    def validate(self) -> None:
        errors = []
        if not self.name.strip():
            errors.append({"field": "name", "message": "Must not be empty"})
        if not self.city.strip():
            errors.append({"field": "city", "message": "Must not be empty"})
        if errors:
            raise ValidationError(errors=errors)
