"""
services/place_sync.py

Purpose
-------
Optimistic Sync Controller for the user's picked places.

- Mutations apply to the local list immediately, then the full new list is
  written to the remote store.
- On a failed write the list is restored to the snapshot taken right before
  that mutation, and a SyncError is recorded for the error dialog.
- The removal flow is a small state machine:
    IDLE -> PENDING_CONFIRMATION -> IDLE (cancel)
                                 -> COMMITTING -> IDLE (success | failure + error)
- Every transition is appended to `transitions` and forwarded to an optional sink.

Concurrency
-----------
asyncio, single thread. Snapshot + optimistic mutation run before the first
await, so two overlapping mutations each hold their own snapshot. A failing
later mutation may therefore undo an earlier one locally; callers needing
strict ordering must serialize actions themselves.

No Streamlit imports; the remote client is duck-typed:
    fetch_user_places() -> list[Place]
    replace_user_places(list[Place]) -> Any
"""

from __future__ import annotations
from typing import Any, Callable, Dict, List, Optional

from state import FetchState, Place, RemovalPhase, SyncError, dedupe_by_id, place_ids
from utils.constants import MSG_DELETE_PLACE, MSG_FETCH_USER_PLACES, MSG_UPDATE_PLACES
from utils.time import now_utc_iso

TransitionSink = Callable[[Dict[str, Any]], None]


class InvalidTransition(RuntimeError):
    """Raised when an operation is called in a phase that does not allow it."""


def _error_message(exc: BaseException, default: str) -> str:
    msg = str(exc).strip()
    return msg or default


class PlaceSyncController:
    def __init__(self, client: Any, *, sink: Optional[TransitionSink] = None):
        self._client = client
        self._sink = sink
        self._initialized = False

        self.picked: List[Place] = []
        self.fetch_state = FetchState()
        self.sync_error: Optional[SyncError] = None
        self.phase: RemovalPhase = RemovalPhase.IDLE
        self.pending: Optional[Place] = None
        self.transitions: List[Dict[str, Any]] = []

    # ---------------------------
    # Read-only views
    # ---------------------------

    @property
    def confirmation_open(self) -> bool:
        return self.phase is RemovalPhase.PENDING_CONFIRMATION

    @property
    def error_open(self) -> bool:
        return self.sync_error is not None

    @property
    def initialized(self) -> bool:
        return self._initialized

    # ---------------------------
    # Initial load
    # ---------------------------

    async def initialize(self) -> None:
        """Fetch the user's places once per controller; later calls do nothing."""
        if self._initialized:
            return
        self._initialized = True

        self.fetch_state.start()
        self._record("initialize_started")
        try:
            places = await self._client.fetch_user_places()
        except Exception as e:  # remote failures never escape the controller
            self.picked = []
            self.fetch_state.fail(_error_message(e, MSG_FETCH_USER_PLACES))
            self._record("initialize_failed", message=self.fetch_state.error.message)
            return

        self.picked = dedupe_by_id(list(places))
        self.fetch_state.succeed(self.picked)
        self._record("initialize_succeeded")

    # ---------------------------
    # Pick
    # ---------------------------

    async def pick_place(self, place: Place) -> bool:
        """
        Prepend `place` and write the new list. Returns False for a duplicate
        (no mutation, no remote write), True once a write was attempted.
        """
        if not isinstance(place.id, str) or not place.id.strip():
            raise ValueError(f"place id must be a non-empty string, got {place.id!r}")

        if place.id in place_ids(self.picked):
            self._record("pick_skipped", place_id=place.id)
            return False

        snapshot = list(self.picked)
        updated = [place, *snapshot]
        self.picked = updated
        self._record("pick_applied", place_id=place.id)

        try:
            await self._client.replace_user_places(list(updated))
        except Exception as e:
            self._rollback(snapshot, _error_message(e, MSG_UPDATE_PLACES), "pick_rolled_back", place.id)
            return True

        self._record("pick_committed", place_id=place.id)
        return True

    # ---------------------------
    # Removal flow
    # ---------------------------

    def request_removal(self, place: Place) -> None:
        """Capture the removal target and open the confirmation dialog. No mutation."""
        self.pending = place
        self.phase = RemovalPhase.PENDING_CONFIRMATION
        self._record("removal_requested", place_id=place.id)

    def cancel_removal(self) -> None:
        if self.phase is not RemovalPhase.PENDING_CONFIRMATION:
            return
        place_id = self.pending.id if self.pending else None
        self.pending = None
        self.phase = RemovalPhase.IDLE
        self._record("removal_cancelled", place_id=place_id)

    async def confirm_removal(self) -> None:
        if self.phase is not RemovalPhase.PENDING_CONFIRMATION or self.pending is None:
            raise InvalidTransition(f"confirm_removal requires a pending selection (phase={self.phase.value})")

        target = self.pending
        snapshot = list(self.picked)
        updated = [p for p in snapshot if p.id != target.id]
        self.picked = updated
        self.pending = None
        self.phase = RemovalPhase.COMMITTING
        self._record("removal_applied", place_id=target.id)

        try:
            await self._client.replace_user_places(list(updated))
        except Exception as e:
            self._rollback(snapshot, _error_message(e, MSG_DELETE_PLACE), "removal_rolled_back", target.id)
            self._finish_commit()
            return

        self._finish_commit()
        self._record("removal_committed", place_id=target.id)

    def _finish_commit(self) -> None:
        # A new removal may have been requested while this one was in flight
        if self.phase is RemovalPhase.COMMITTING:
            self.phase = RemovalPhase.IDLE

    # ---------------------------
    # Errors
    # ---------------------------

    def dismiss_error(self) -> None:
        if self.sync_error is None:
            return
        self.sync_error = None
        self._record("error_dismissed")

    def _rollback(self, snapshot: List[Place], message: str, event: str, place_id: str) -> None:
        self.picked = snapshot
        self.sync_error = SyncError(message=message)
        self._record(event, place_id=place_id, message=message)

    # ---------------------------
    # Transition log
    # ---------------------------

    def _record(self, event: str, **details: Any) -> None:
        entry: Dict[str, Any] = {
            "ts_utc": now_utc_iso(),
            "event": event,
            "phase": self.phase.value,
            "count": len(self.picked),
        }
        entry.update({k: v for k, v in details.items() if v is not None})
        self.transitions.append(entry)
        if self._sink is None:
            return
        try:
            self._sink(dict(entry))
        except Exception:
            # Sink is observability only; the sync flow must not depend on it
            pass
