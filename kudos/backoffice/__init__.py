from fastapi import FastAPI
from sqladmin import Admin
from sqlalchemy import Engine

from kudos.backoffice.auth import BackofficeAuth
from kudos.backoffice.views import SessionBackoffice, UserBackoffice
from kudos.core.constants import Routes
from kudos.core.settings import Settings


def mount_backoffice(app: FastAPI, engine: Engine, settings: Settings) -> Admin:
    """Mount the SQLAdmin back-office UI."""
    admin = Admin(
        app=app,
        engine=engine,
        base_url=Routes.BACKOFFICE.prefix,
        title="Kudos back-office",
        authentication_backend=BackofficeAuth(engine, settings.session_secret_key),
    )
    admin.add_view(UserBackoffice)
    admin.add_view(SessionBackoffice)
    return admin
