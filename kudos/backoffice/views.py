from sqladmin import ModelView

from kudos.auth.models import UserSession
from kudos.user.models import User


class UserBackoffice(ModelView, model=User):
    name = "User"
    name_plural = "Users"
    icon = "fa-solid fa-user"

    column_list = [
        User.id,
        User.name,
        User.email,
        User.role,
        User.activation_status,
        User.is_active,
        User.created_at,
        User.deleted_at,
    ]
    column_searchable_list = [User.name, User.email]
    column_sortable_list = [User.id, User.name, User.email, User.created_at]
    form_excluded_columns = [User.password_hash, User.created_at, User.updated_at]
    # Accounts are created through signup, which sets the password hash.
    can_create = False
    # Removal is a soft delete through the admin API.
    can_delete = False


class SessionBackoffice(ModelView, model=UserSession):
    name = "Session"
    name_plural = "Sessions"
    icon = "fa-solid fa-key"

    column_list = [
        UserSession.id,
        UserSession.user_id,
        UserSession.created_at,
        UserSession.expires_at,
        UserSession.deleted_at,
    ]
    column_sortable_list = [UserSession.id, UserSession.expires_at]
    # Tokens are bearer credentials; never render them.
    column_details_exclude_list = [UserSession.session_token]
    can_create = False
    can_edit = False
    can_delete = False
