"""
bingo_referee.service — Request/response facade
===============================================

The operations exposed to the transport layer. Every method takes the
caller identity the transport authenticated and returns a plain dict.
Rejections come back as result values with an error code; game errors
are never raised to the transport.

    service = BingoService(BingoGame(config))
    result = await service.register_card(caller)
    if not result["ok"]:
        print(result["error"]["code"])
"""

from __future__ import annotations

import logging
from typing import Optional

from ._core.game import BingoGame
from ._core.snapshot import card_payload
from .errors import BingoRefereeError
from .types import ActionResult, CardPayload, CardResult, ClaimResult, StateSnapshot

logger = logging.getLogger("bingo_referee.service")


class BingoService:
    """
    Transport-facing wrapper around a ``BingoGame``.

    Attributes:
        game: The round this service exposes
    """

    def __init__(self, game: BingoGame):
        self.game = game

    # ── Updates ──────────────────────────────────────────────

    async def register_card(self, caller: str) -> CardResult:
        try:
            card = await self.game.register_card(caller)
        except BingoRefereeError as e:
            return self._card_error(caller, "RegisterCard", e)
        return {"ok": True, "card": card_payload(card), "error": None}

    async def reset_card(self, caller: str) -> CardResult:
        try:
            card = await self.game.reset_card(caller)
        except BingoRefereeError as e:
            return self._card_error(caller, "ResetCard", e)
        return {"ok": True, "card": card_payload(card), "error": None}

    async def claim_win(self, caller: str) -> ClaimResult:
        try:
            won = await self.game.claim_win(caller)
        except BingoRefereeError as e:
            logger.info(f"ClaimWin by {caller} rejected: {e.code}")
            return {"ok": False, "won": False, "error": e.to_payload()}
        return {"ok": True, "won": won, "error": None}

    async def start_round(self) -> ActionResult:
        return await self._action("StartRound", self.game.start_round)

    async def start_new_round(self) -> ActionResult:
        return await self._action("StartNewRound", self.game.start_new_round)

    # ── Queries ──────────────────────────────────────────────

    def get_state(self) -> StateSnapshot:
        return self.game.get_state()

    def get_player_count(self) -> int:
        return self.game.get_player_count()

    def get_remaining_slots(self) -> int:
        return self.game.get_remaining_slots()

    def get_card(self, caller: str, target: Optional[str] = None) -> Optional[CardPayload]:
        """Card of ``target`` if given, else of the caller. None if absent."""
        card = self.game.get_card(target or caller)
        return card_payload(card) if card else None

    # ── Helpers ──────────────────────────────────────────────

    @staticmethod
    def _card_error(caller: str, operation: str, error: BingoRefereeError) -> CardResult:
        logger.info(f"{operation} by {caller} rejected: {error.code}")
        return {"ok": False, "card": None, "error": error.to_payload()}

    @staticmethod
    async def _action(operation: str, call) -> ActionResult:
        try:
            await call()
        except BingoRefereeError as e:
            logger.info(f"{operation} rejected: {e.code}")
            return {"ok": False, "error": e.to_payload()}
        return {"ok": True, "error": None}
