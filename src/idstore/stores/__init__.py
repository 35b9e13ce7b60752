"""Storage capability contracts consumed by the identity framework.

Each contract covers one capability. A concrete store implements as
many of them as it supports; ``UserStoreSQLAlchemy`` implements all the
user capabilities at once.
"""

from idstore.stores.role_store import RoleStore
from idstore.stores.user_email_store import UserEmailStore
from idstore.stores.user_password_store import UserPasswordStore
from idstore.stores.user_role_store import UserRoleStore
from idstore.stores.user_security_stamp_store import UserSecurityStampStore
from idstore.stores.user_store import UserStore

__all__ = [
    "RoleStore",
    "UserEmailStore",
    "UserPasswordStore",
    "UserRoleStore",
    "UserSecurityStampStore",
    "UserStore",
]
