"""Automated champion select actions: accepting matches, picking, banning and trading."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any, Protocol

__all__ = ["AutomationUseCase"]

_log = logging.getLogger("soraka.biz.automation")


class _GameflowRepo(Protocol):
    def get_ready_check_status(self) -> Any: ...

    def accept_ready_check(self) -> None: ...


class _ChampSelectRepo(Protocol):
    def get_session(self) -> Any: ...

    def select_champion(self, action_id: int, champion_id: int, completed: bool) -> None: ...

    def ban_champion(self, action_id: int, champion_id: int, completed: bool) -> None: ...

    def accept_trade(self, trade_id: int) -> None: ...

    def accept_swap(self, swap_id: int) -> None: ...


class _RunesRepo(Protocol):
    def get_current_page(self) -> Any: ...

    def delete_page(self, page_id: int) -> None: ...

    def create_page(
        self, name: str, primary_style_id: int, sub_style_id: int, selected_perk_ids: Sequence[int]
    ) -> None: ...


class AutomationUseCase:
    """Automatic ready-check acceptance, pick and ban, trade and swap acceptance, rune pages.

    Repository failures are raised as exceptions, except where noted.
    """

    def __init__(
        self,
        gameflow_repo: _GameflowRepo,
        champ_select_repo: _ChampSelectRepo,
        runes_repo: _RunesRepo,
        profile_repo: Any = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.gameflow_repo = gameflow_repo
        self.champ_select_repo = champ_select_repo
        self.runes_repo = runes_repo
        self.profile_repo = profile_repo
        self.log = logger or _log

    def auto_accept_ready_check(self) -> bool:
        """Accept a pending ready check; return True if one was accepted."""
        status = self.gameflow_repo.get_ready_check_status()
        if status.state == "InProgress" and status.player_response == "None":
            self.gameflow_repo.accept_ready_check()
            return True
        return False

    def _own_action(self, session: Any, action_type: str) -> Any | None:
        for group in session.actions:
            for action in group:
                if (
                    action.actor_cell_id == session.local_player_cell_id
                    and action.type == action_type
                    and not action.completed
                    and action.is_in_progress
                ):
                    return action
        return None

    def auto_select_champion(self, champion_id: int) -> bool:
        """Lock in ``champion_id`` for the local player's current pick; return True if done."""
        session = self.champ_select_repo.get_session()
        action = self._own_action(session, "pick")
        if action is None:
            return False
        self.champ_select_repo.select_champion(action.id, champion_id, True)
        return True

    def auto_ban_champion(self, champion_id: int) -> bool:
        """Ban ``champion_id`` for the local player's current ban; return True if done."""
        session = self.champ_select_repo.get_session()
        action = self._own_action(session, "ban")
        if action is None:
            return False
        self.champ_select_repo.ban_champion(action.id, champion_id, True)
        return True

    def auto_accept_trades(self) -> list[int]:
        """Accept every received champion trade; failures are logged and skipped.

        Returns the ids of the trades accepted.
        """
        session = self.champ_select_repo.get_session()
        accepted: list[int] = []
        for trade in session.trades:
            if trade.state != "RECEIVED":
                continue
            try:
                self.champ_select_repo.accept_trade(trade.id)
            except Exception as exc:  # noqa: BLE001 - one failed trade must not stop the rest
                self.log.error("Failed to accept trade %d: %s", trade.id, exc)
            else:
                accepted.append(trade.id)
        return accepted

    def auto_accept_swaps(self) -> list[int]:
        """Accept every received pick order swap; failures are logged and skipped.

        Returns the ids of the swaps accepted.
        """
        session = self.champ_select_repo.get_session()
        accepted: list[int] = []
        for swap in session.pick_order_swaps:
            if swap.state != "RECEIVED":
                continue
            try:
                self.champ_select_repo.accept_swap(swap.id)
            except Exception as exc:  # noqa: BLE001 - one failed swap must not stop the rest
                self.log.error("Failed to accept swap %d: %s", swap.id, exc)
            else:
                accepted.append(swap.id)
        return accepted

    def apply_rune_page(
        self,
        name: str,
        primary_style_id: int,
        sub_style_id: int,
        selected_perk_ids: Sequence[int],
    ) -> None:
        """Replace the current deletable rune page with a new one.

        Failures reading or deleting the current page are ignored; a failure
        creating the new page is raised.
        """
        try:
            current = self.runes_repo.get_current_page()
        except Exception:  # noqa: BLE001 - a missing current page is not an error here
            current = None
        if current is not None and current.is_deletable:
            try:
                self.runes_repo.delete_page(current.id)
            except Exception:  # noqa: BLE001 - creating the new page still proceeds
                pass
        self.runes_repo.create_page(name, primary_style_id, sub_style_id, list(selected_perk_ids))