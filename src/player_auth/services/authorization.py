"""Issuance and redemption of player authentication codes.

A player gets a code when they join the game server and redeems it
through the chat bot. Each player has at most one pending code and each
code can be redeemed once.
"""

import logging
from collections.abc import Callable
from typing import NamedTuple, Optional

from player_auth.config import settings
from player_auth.errors import StorageError, UniqueViolation
from player_auth.models import AuthCode
from player_auth.services.codes import generate_code
from player_auth.services.store import CodeStore

logger = logging.getLogger(__name__)


class Authorization(NamedTuple):
    """Result of redeeming a code. player_id is empty when ok is False."""

    player_id: str
    ok: bool


class AuthorizationService:
    """Issues, looks up and redeems auth codes over a CodeStore."""

    def __init__(
        self,
        store: CodeStore,
        generator: Callable[[], str] = generate_code,
        max_attempts: Optional[int] = None,
    ):
        self.store = store
        self.generator = generator
        self.max_attempts = (
            settings.max_issue_attempts if max_attempts is None else max_attempts
        )

    def issue_code(self, player_id: str) -> str:
        """Return the player's pending code, creating one if they have none.

        The read-then-insert is not atomic; the unique constraints decide
        between concurrent issuers. On a conflict the pending code is read
        again, and if the player still has none the new code collided with
        another player's and is regenerated.
        """
        if not player_id:
            raise ValueError("player_id must be a non-empty string")

        for _ in range(self.max_attempts):
            existing = self.store.find_by_player(player_id)
            if existing:
                return existing.auth_code

            code = self.generator()
            try:
                self.store.insert(AuthCode(auth_code=code, player_id=player_id))
            except UniqueViolation:
                logger.debug("Code insert conflicted for player %s, re-reading", player_id)
                continue

            logger.info("Issued auth code for player %s", player_id)
            return code
        else:
            raise StorageError(
                f"Failed to issue a unique code for {player_id} after "
                f"{self.max_attempts} attempts"
            )

    def get_all_auth_codes(self) -> list[AuthCode]:
        """List every pending code."""
        return self.store.list_all()

    def get_auth_code(self, player_id: str) -> Optional[str]:
        """Return the player's pending code, or None."""
        found = self.store.find_by_player(player_id)
        return found.auth_code if found else None

    def get_player_id(self, code: str) -> Optional[str]:
        """Return the player bound to a code, or None."""
        found = self.store.find_by_code(code)
        return found.player_id if found else None

    def authorize(self, code: str) -> Authorization:
        """Redeem a code, consuming it in the same step as the lookup."""
        taken = self.store.take_by_code(code)
        if taken is None:
            return Authorization("", False)

        logger.info("Auth code redeemed for player %s", taken.player_id)
        return Authorization(taken.player_id, True)

    def remove_code(self, code: str) -> int:
        """Remove a code without redeeming it. Removing an unknown code is a no-op."""
        removed = self.store.delete_by_code(code)
        if removed:
            logger.info("Removed a pending auth code")
        return removed
