from sqladmin.authentication import AuthenticationBackend
from sqlalchemy import Engine
from sqlmodel import Session
from starlette.requests import Request

from kudos.auth.passwords import verify_password
from kudos.user.repository import UserRepository

SESSION_KEY = "backoffice_user_id"


class BackofficeAuth(AuthenticationBackend):
    """SQLAdmin login for admin-role users, backed by Starlette sessions."""

    def __init__(self, engine: Engine, secret_key: str) -> None:
        super().__init__(secret_key=secret_key)
        self._engine = engine

    async def login(self, request: Request) -> bool:
        form = await request.form()
        email = str(form.get("username", form.get("email", ""))).strip()
        password = str(form.get("password", ""))

        with Session(self._engine) as session:
            user = UserRepository(session).find_by_email(email)
            ok = (
                user is not None
                and user.is_admin
                and user.is_active
                and verify_password(password, user.password_hash)
            )
            if ok:
                request.session[SESSION_KEY] = user.id
        return ok

    async def logout(self, request: Request) -> bool:
        request.session.clear()
        return True

    async def authenticate(self, request: Request) -> bool:
        user_id = request.session.get(SESSION_KEY)
        if user_id is None:
            return False
        # Re-check on every request so a demoted or deleted admin loses access.
        with Session(self._engine) as session:
            user = UserRepository(session).get(user_id)
            return user is not None and user.is_admin and user.is_active
