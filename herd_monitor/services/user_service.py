"""
Service layer for users and sign-in.

Architecture:
    API Layer (routers) -> UserService -> ScriptClient / RegistryService

Sign-in yields an explicit Session that callers pass to the views that
need it, instead of keeping the identity in ambient state.
"""
import logging
from typing import List, Optional

from herd_monitor.clients import ScriptClient
from herd_monitor.core.exceptions import ScriptAPIError
from herd_monitor.repositories import FarmRepository
from herd_monitor.repositories.mappers import session_from_api
from herd_monitor.schemas import (
    USER_ID_PREFIX,
    CommandResult,
    OwnerCreate,
    Session,
    User,
    UserCreate,
    UserRegistration,
    UserUpdate,
)
from herd_monitor.services.registry_service import RegistryService, next_sequential_id, run_command

logger = logging.getLogger(__name__)


class UserService:
    """
    User management on top of the script endpoint's user table.
    """

    def __init__(
        self,
        farm_repository: FarmRepository,
        registry_service: RegistryService,
        script_client: ScriptClient,
    ):
        self._repo = farm_repository
        self._registry = registry_service
        self._script = script_client

    async def fetch_users(self) -> List[User]:
        """All users, or an empty list if they cannot be read."""
        return await self._repo.fetch_users()

    async def generate_user_id(self) -> str:
        """Next ``USER###`` id based on the users currently readable."""
        users = await self.fetch_users()
        return next_sequential_id((u.user_id for u in users), USER_ID_PREFIX)

    async def add_user(self, user: UserCreate, address: str = "") -> CommandResult:
        """
        Register a user under a freshly generated id.

        A farmer without an ``owner_id`` first gets an owner record created
        from their name, phone and email. If that owner insert fails, whether
        reported or in transport, the user is still registered without an
        owner link.

        Args:
            user: The user to create.
            address: Address for an auto-created owner record.

        Returns:
            CommandResult with ``user_id`` and ``owner_id`` set

        Raises:
            ScriptAPIError: If the register call itself fails in transport
        """
        user_id = await self.generate_user_id()
        owner_id = user.owner_id or ""

        if user.user_role == "farmer" and not owner_id:
            try:
                owner_result = await self._registry.add_owner_with_id(OwnerCreate(
                    owner_name=user.full_name,
                    phone=user.phone,
                    address=address,
                    email=user.email,
                ))
            except ScriptAPIError as e:
                logger.warning(
                    f"Owner auto-creation failed for {user.username}: {e.detail}",
                    extra={"status_code": e.status_code},
                )
            else:
                if owner_result.success and owner_result.owner_id:
                    owner_id = owner_result.owner_id
                else:
                    logger.warning(
                        f"Owner auto-creation failed for {user.username}: {owner_result.message}"
                    )

        logger.info(f"Registering user {user.username} as {user_id}")
        return await run_command(self._script, "register", {
            "userId": user_id,
            "username": user.username,
            "password": user.password,
            "fullName": user.full_name,
            "email": user.email,
            "phone": user.phone,
            "userRole": user.user_role,
            "ownerId": owner_id,
        }, userId=user_id, ownerId=owner_id)

    async def register_user(self, registration: UserRegistration) -> CommandResult:
        """Public self-registration; a missing email is sent as empty."""
        return await self.add_user(
            UserCreate(
                username=registration.username,
                password=registration.password,
                full_name=registration.full_name,
                email=registration.email or "",
                phone=registration.phone,
                user_role=registration.user_role,
            ),
            address=registration.address or "",
        )

    async def update_user(self, user_id: str, updates: UserUpdate) -> CommandResult:
        """Send only the fields set on ``updates``."""
        logger.info(f"Updating user: {user_id}")
        return await run_command(self._script, "updateUser", {"userId": user_id, **updates.to_wire()})

    async def deactivate_user(self, user_id: str) -> CommandResult:
        """Soft-delete: the row stays, with status ``inactive``."""
        return await self.update_user(user_id, UserUpdate(status="inactive"))

    async def login(self, username: str, password: str) -> Optional[Session]:
        """
        Check credentials against the script endpoint.

        Returns:
            Session on success, None when the credentials are rejected

        Raises:
            ScriptAPIError: If the endpoint cannot be reached or misbehaves
        """
        result = await self._script.call("login", {"username": username, "password": password})
        user = result.get("user")
        if not result.get("success") or not isinstance(user, dict):
            logger.info(f"Login rejected for {username}")
            return None

        session = session_from_api(user, username)
        logger.info(f"User {session.user_id} signed in as {session.role}")
        return session
