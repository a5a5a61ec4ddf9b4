"""HTTP Basic authentication for service routes"""

import logging
import secrets
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPBasic, HTTPBasicCredentials

from app.config import Settings
from app.exceptions import UnauthorizedError

logger = logging.getLogger("northwind.security")

_basic = HTTPBasic(auto_error=False)


def make_basic_auth_dependency(app_settings: Settings):
    """Build a dependency that checks credentials against the configured user"""

    def require_basic_auth(
        credentials: Optional[HTTPBasicCredentials] = Depends(_basic),
    ) -> str:
        if credentials is None:
            raise UnauthorizedError("Authentication required")
        user_ok = secrets.compare_digest(
            credentials.username.encode(), app_settings.auth_username.encode()
        )
        password_ok = secrets.compare_digest(
            credentials.password.encode(), app_settings.auth_password.encode()
        )
        if not (user_ok and password_ok):
            logger.warning("Rejected credentials for user %s", credentials.username)
            raise UnauthorizedError("Invalid credentials")
        return credentials.username

    return require_basic_auth
