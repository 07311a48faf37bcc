from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from kudos.core.settings import Settings


def add_cors_middleware(app: FastAPI, settings: Settings) -> None:
    # Session cookies need credentialed CORS.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )
