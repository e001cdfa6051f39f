from __future__ import annotations

import logging

from service_directory.domain.entities.selection_state import SelectionState
from service_directory.domain.entities.service_record import RecordId


class SelectionUseCase:
    """Two-state detail selection: none, or open on one record."""

    def __init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def select(self, current_state: SelectionState, record_id: RecordId) -> SelectionState:
        """Open `record_id`, replacing any record that is already open."""
        if current_state.is_open and current_state.record_id != record_id:
            self._logger.debug(
                "Replacing open record",
                extra={"record_id": record_id, "reason": f"was {current_state.record_id}"},
            )
        return SelectionState(status="open", record_id=record_id)

    def close(self, current_state: SelectionState) -> SelectionState:
        # Closing when nothing is open is a no-op
        if not current_state.is_open:
            return current_state
        return SelectionState()
