"""
Business logic for user accounts.

Accounts are identified by a unique, lower-cased ``login``.  Passwords
are stored as PBKDF2 hashes (see ``core.security``).  The first account
ever registered becomes an administrator; every later one is a regular
user.
"""

import logging
from typing import Optional

from furrymatch_api.app.core.security import ROLE_ADMIN, ROLE_USER, hash_password, verify_password
from furrymatch_api.app.repositories.base import Page, PageRequest
from furrymatch_api.app.repositories.user_repository import UserRepository
from furrymatch_api.app.schemas.user import UserCreate, UserRead, UserRecord

logger = logging.getLogger(__name__)


class UserService:
    """Account registration, authentication and removal."""

    def __init__(self, repository: UserRepository) -> None:
        self.repository = repository

    async def register_user(self, data: UserCreate) -> UserRead:
        """Create a new account.

        Raises ``ValueError`` with ``"loginexists"`` or ``"emailexists"``
        when the login or email is already taken.
        """
        login = data.login.lower()
        if self.repository.find_by_login(login) is not None:
            raise ValueError("loginexists")
        if data.email and self.repository.exists_by_email(data.email):
            raise ValueError("emailexists")
        role_id = ROLE_ADMIN if self.repository.count() == 0 else ROLE_USER
        record = UserRecord(
            login=login,
            email=data.email.lower() if data.email else None,
            first_name=data.first_name,
            last_name=data.last_name,
            password=hash_password(data.password),
            activated=True,
            role_id=role_id,
        )
        stored = self.repository.save(record)
        logger.info("Registered user %s (role %s)", login, role_id)
        return stored.to_read()

    async def authenticate(self, login: str, password: str) -> Optional[UserRead]:
        """Return the account when the credentials match an active account."""
        record = self.repository.find_by_login(login)
        if record is None or not record.activated:
            return None
        if not verify_password(password, record.password):
            return None
        return record.to_read()

    async def get_user_by_login(self, login: str) -> Optional[UserRead]:
        record = self.repository.find_by_login(login)
        return record.to_read() if record else None

    async def list_users(self, page_request: PageRequest) -> Page[UserRead]:
        page = self.repository.find_all(page_request)
        return Page(
            content=[record.to_read() for record in page.content],
            number=page.number,
            size=page.size,
            total_elements=page.total_elements,
        )

    async def change_password(self, login: str, new_password: str) -> bool:
        """Replace the password hash of ``login``.  Returns ``False`` if unknown."""
        record = self.repository.find_by_login(login)
        if record is None:
            return False
        self.repository.save(record.model_copy(update={"password": hash_password(new_password)}))
        logger.info("Password changed for user %s", record.login)
        return True

    async def delete_user(self, login: str) -> bool:
        """Delete the account.  Returns ``False`` if it did not exist."""
        deleted = self.repository.delete_by_login(login)
        if deleted:
            logger.info("Deleted user %s", login.lower())
        return deleted

    def is_primary_admin(self, user_id: int) -> bool:
        return self.repository.first_admin_id() == user_id
