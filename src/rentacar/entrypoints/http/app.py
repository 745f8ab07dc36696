from fastapi import FastAPI

from rentacar.entrypoints.http.exception_handlers import register_exception_handlers
from rentacar.entrypoints.http.routes.auth import router as auth_router
from rentacar.entrypoints.http.routes.bookings import router as bookings_router
from rentacar.entrypoints.http.routes.cars import router as cars_router
from rentacar.entrypoints.http.routes.health import router as health_router
from rentacar.infra.log_config import configure_logging


def build_app() -> FastAPI:
    configure_logging()

    app = FastAPI(
        title="RentACar API",
        description="""
        Car rental API for browsing the fleet, pricing bookings and signing in.

        ## Features
        - Search the car catalog with filters and sorting
        - Featured and similar cars
        - Booking price quotes (daily rate plus optional driver)
        - Login and registration

        ## Money
        All amounts are whole Indonesian rupiah (integers).

        ## Error Handling
        All errors return structured JSON responses with error codes.
        """,
        version="0.1.0",
        contact={
            "name": "RentACar Team",
            "email": "dev@rentacar.id",
        },
        license_info={
            "name": "Proprietary",
        },
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(cars_router, prefix="/v1")
    app.include_router(bookings_router, prefix="/v1")
    app.include_router(auth_router, prefix="/v1")

    return app


app = build_app()
