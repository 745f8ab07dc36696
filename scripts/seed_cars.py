#!/usr/bin/env python3
"""
Seed the rental fleet, pickup locations, site settings and an admin account.

Features:
- Deterministic: fixed seed → same dataset every run
- Idempotent: safe to run multiple times (clears before seeding)
- Realism-lite: daily rates correlated with car type, brand band and year

Usage:
    python scripts/seed_cars.py
"""

from __future__ import annotations

import os
import random
import sys
from pathlib import Path

from werkzeug.security import generate_password_hash

# Add src to path so we can import our modules
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from rentacar.domain.car import CarType, FuelType, Transmission
from rentacar.domain.settings import SiteSettings
from rentacar.domain.user import Role, default_avatar
from rentacar.infra.db.models import (
    BookingRow,
    CarRow,
    FavoriteRow,
    LocationRow,
    SettingsRow,
    UserRow,
)
from rentacar.infra.db.models.settings import SETTINGS_ROW_ID
from rentacar.infra.db.session import get_session


# ==============================================================================
# Configuration
# ==============================================================================

RANDOM_SEED = 42
NUM_CARS = 24
ADMIN_EMAIL = os.getenv("RENTACAR_ADMIN_EMAIL", "admin@rentacar.id")
ADMIN_PASSWORD = os.getenv("RENTACAR_ADMIN_PASSWORD", "admin123")


# ==============================================================================
# Indonesian Rental Fleet
# ==============================================================================

# Base daily rates in rupiah by brand band
BANDS = {
    "economy": {"brands": ["Daihatsu", "Suzuki", "Wuling"], "rate_min": 250_000, "rate_max": 400_000},
    "mid_range": {"brands": ["Toyota", "Honda", "Mitsubishi"], "rate_min": 350_000, "rate_max": 700_000},
    "premium": {"brands": ["BMW", "Mercedes-Benz", "Hyundai"], "rate_min": 900_000, "rate_max": 2_500_000},
}

MODELS_BY_BRAND: dict[str, list[tuple[str, CarType, int]]] = {
    "Daihatsu": [("Xenia", CarType.MPV, 7), ("Ayla", CarType.HATCHBACK, 5), ("Terios", CarType.SUV, 7)],
    "Suzuki": [("Ertiga", CarType.MPV, 7), ("Ignis", CarType.HATCHBACK, 5), ("XL7", CarType.SUV, 7)],
    "Wuling": [("Confero", CarType.MPV, 8), ("Air ev", CarType.ELECTRIC, 4), ("Almaz", CarType.SUV, 7)],
    "Toyota": [("Avanza", CarType.MPV, 7), ("Innova Zenix", CarType.MPV, 7), ("Fortuner", CarType.SUV, 7)],
    "Honda": [("Brio", CarType.HATCHBACK, 5), ("City", CarType.SEDAN, 5), ("CR-V", CarType.SUV, 5)],
    "Mitsubishi": [("Xpander", CarType.MPV, 7), ("Pajero Sport", CarType.SUV, 7)],
    "BMW": [("320i", CarType.SEDAN, 5), ("Z4", CarType.SPORT, 2)],
    "Mercedes-Benz": [("C 200", CarType.SEDAN, 5), ("V-Class", CarType.MPV, 7)],
    "Hyundai": [("Ioniq 5", CarType.ELECTRIC, 5), ("Palisade", CarType.SUV, 7)],
}

FEATURES = ["AC", "Bluetooth", "USB Charger", "Dashcam", "Airbag", "GPS", "Sunroof", "Apple CarPlay"]

LOCATIONS = [
    ("Jakarta Pusat", "Jakarta", "Jl. M.H. Thamrin No. 10"),
    ("Bandung", "Bandung", "Jl. Asia Afrika No. 8"),
    ("Surabaya", "Surabaya", "Jl. Pemuda No. 27"),
    ("Denpasar", "Bali", "Jl. Teuku Umar No. 88"),
    ("Yogyakarta", "Yogyakarta", "Jl. Malioboro No. 52"),
]


# ==============================================================================
# Price Calculation with Realism
# ==============================================================================


def calculate_daily_rate(brand: str, year: int) -> int:
    """
    Daily rate based on brand band and year.

    Logic:
    - Premium brands cost more than economy
    - Older cars rent ~5% cheaper per year, capped at 30%
    - Rounded to the nearest 25.000 rupiah
    """
    band = next((b for b in BANDS.values() if brand in b["brands"]), BANDS["mid_range"])
    base_rate = random.randint(band["rate_min"], band["rate_max"])

    years_old = max(0, 2024 - year)
    discount_percent = min(5 * years_old, 30)
    rate = base_rate * (100 - discount_percent) // 100

    return max(25_000, round(rate / 25_000) * 25_000)


def generate_car(location: str) -> CarRow:
    """Generate a single random car with realistic data."""
    band = random.choice(list(BANDS))
    brand = random.choice(BANDS[band]["brands"])
    name, car_type, seats = random.choice(MODELS_BY_BRAND[brand])

    year = random.choices(range(2018, 2025), weights=[1, 2, 2, 3, 4, 5, 6], k=1)[0]
    price_per_day = calculate_daily_rate(brand, year)

    if car_type == CarType.ELECTRIC:
        fuel = FuelType.ELECTRIC
    elif car_type == CarType.SUV and band != "economy":
        fuel = random.choice([FuelType.DIESEL, FuelType.BENSIN])
    else:
        fuel = random.choices([FuelType.BENSIN, FuelType.HYBRID], weights=[6, 1], k=1)[0]

    transmission = (
        Transmission.AUTOMATIC
        if band == "premium" or year >= 2022
        else random.choice(list(Transmission))
    )

    return CarRow(
        name=f"{brand} {name}",
        brand=brand,
        type=car_type.value,
        year=year,
        transmission=transmission.value,
        fuel=fuel.value,
        seats=seats,
        price_per_day=price_per_day,
        # Weekly/monthly packages: 6 and 25 days' rent
        price_per_week=price_per_day * 6,
        price_per_month=price_per_day * 25,
        rating=round(random.uniform(3.8, 5.0), 1),
        reviews=random.randint(0, 250),
        available=random.random() > 0.15,
        featured=random.random() < 0.3,
        images=[],
        features=random.sample(FEATURES, k=random.randint(3, 6)),
        description=f"{year} {brand} {name}, {seats} seats, {transmission.value.lower()}.",
        location=location,
    )


def seed_cars(num_cars: int = NUM_CARS, seed: int = RANDOM_SEED) -> None:
    """
    Seed the database with the rental fleet and supporting records.

    Args:
        num_cars: Number of cars to generate
        seed: Random seed for deterministic results
    """
    random.seed(seed)

    print(f"🌱 Seeding database with {num_cars} cars (seed={seed})...")

    with get_session() as session:
        # Step 1: Clear existing data (idempotent); dependents first
        print("🗑️  Clearing existing data...")
        for row_type in (FavoriteRow, BookingRow, CarRow, LocationRow):
            deleted_count = session.query(row_type).delete()
            print(f"   Deleted {deleted_count} rows from {row_type.__tablename__}")

        # Step 2: Pickup locations
        session.add_all(
            LocationRow(name=name, city=city, address=address) for name, city, address in LOCATIONS
        )

        # Step 3: Fleet
        print(f"🚗 Generating {num_cars} cars...")
        cars = [generate_car(location=random.choice(LOCATIONS)[1]) for _ in range(num_cars)]
        session.add_all(cars)

        # Step 4: Settings row and admin account (kept if they already exist)
        if session.get(SettingsRow, SETTINGS_ROW_ID) is None:
            defaults = SiteSettings()
            session.add(
                SettingsRow(
                    id=SETTINGS_ROW_ID,
                    site_name=defaults.site_name,
                    driver_fee_per_day=defaults.driver_fee_per_day,
                    min_rental_days=defaults.min_rental_days,
                    max_rental_days=defaults.max_rental_days,
                )
            )

        if session.query(UserRow).filter(UserRow.email == ADMIN_EMAIL).first() is None:
            print(f"👤 Creating admin account {ADMIN_EMAIL}")
            session.add(
                UserRow(
                    email=ADMIN_EMAIL,
                    password_hash=generate_password_hash(ADMIN_PASSWORD),
                    name="Administrator",
                    role=Role.ADMIN.value,
                    is_active=True,
                    avatar=default_avatar(ADMIN_EMAIL),
                )
            )

        session.flush()

        print(f"✅ Successfully seeded {len(cars)} cars!")

        print("\n📊 Sample cars:")
        for i, car in enumerate(cars[:5], 1):
            print(f"   {i}. {car.year} {car.name} - Rp {car.price_per_day:,}/day ({car.transmission}, {car.fuel})")

        if len(cars) > 5:
            print(f"   ... and {len(cars) - 5} more")


# ==============================================================================
# Main
# ==============================================================================


if __name__ == "__main__":
    try:
        seed_cars()
    except Exception as e:
        print(f"❌ Error seeding database: {e}", file=sys.stderr)
        sys.exit(1)
