"""Decoded form of the simulator's |request| payload."""

import json
from typing import Any, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from turnsync.game.exceptions import DecodeError

FAINTED_SUFFIX = " fnt"


class MoveSlot(BaseModel):
    """One of the active Pokemon's move slots."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    disabled: bool = False

    @field_validator("disabled", mode="before")
    @classmethod
    def _coerce_disabled(cls, value: Any) -> bool:
        # The simulator may send the disabling source instead of a bool.
        return bool(value)


class ActiveMoveSet(BaseModel):
    """Move options for an active slot.

    Attributes:
        moves: Move slots in move order (up to 4 are consulted)
        can_mega_evo: Whether the active Pokemon may Mega Evolve this turn
        can_z_move: Per-move Z-move availability, or None when Z-moves are
            not offered at all
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    moves: Tuple[MoveSlot, ...] = ()
    can_mega_evo: bool = Field(default=False, alias="canMegaEvo")
    can_z_move: Optional[Tuple[bool, ...]] = Field(default=None, alias="canZMove")

    @field_validator("can_z_move", mode="before")
    @classmethod
    def _coerce_can_z_move(cls, value: Any) -> Optional[Tuple[bool, ...]]:
        # Entries are Z-move descriptors or null.
        if value is None:
            return None
        if not isinstance(value, (list, tuple)):
            raise ValueError("canZMove must be a list")
        return tuple(bool(entry) for entry in value)


class PokemonStatus(BaseModel):
    """A team member as reported in the request's side block."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    active: bool = False
    condition: str = ""

    @property
    def is_fainted(self) -> bool:
        """True iff the condition string ends with the literal ' fnt' suffix."""
        return self.condition.endswith(FAINTED_SUFFIX)


class SideStatus(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    pokemon: Tuple[PokemonStatus, ...] = ()


class RequestSnapshot(BaseModel):
    """Immutable snapshot of the most recent |request| line.

    Only the fields the action-space enumerator and the synchronizer need are
    decoded. Everything else in the payload is ignored, but the raw JSON text is
    kept on raw_json for collaborators that need more.

    Attributes:
        wait: True when the simulator is narrating the opponent's turn
        force_switch: True when a switch is forced (e.g. after a faint)
        team_preview: True when the request is for a team order
        rqid: Request id, if the simulator sent one
        side: Our side of the battle in team order
        active: Move options for the active slot, present when a move is due
        raw_json: The payload text this snapshot was decoded from
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    wait: bool = False
    force_switch: bool = Field(default=False, alias="forceSwitch")
    team_preview: bool = Field(default=False, alias="teamPreview")
    rqid: Optional[int] = None
    side: SideStatus = Field(default_factory=SideStatus)
    active: Optional[Tuple[ActiveMoveSet, ...]] = None
    raw_json: str = Field(default="", exclude=True)

    @field_validator("force_switch", mode="before")
    @classmethod
    def _coerce_force_switch(cls, value: Any) -> bool:
        # Sent as one flag per active slot, e.g. [true].
        if isinstance(value, (list, tuple)):
            return any(bool(entry) for entry in value)
        return bool(value)

    @classmethod
    def from_json(cls, raw_json: str) -> "RequestSnapshot":
        """Decode a |request| payload.

        Args:
            raw_json: The text following "|request|"

        Returns:
            The decoded RequestSnapshot

        Raises:
            DecodeError: If the payload is not valid JSON, is not a JSON
                object, or does not match the expected shape
        """
        try:
            data = json.loads(raw_json)
        except json.JSONDecodeError as e:
            raise DecodeError(raw_json, f"invalid JSON: {e.msg}") from e
        except RecursionError as e:
            raise DecodeError(raw_json, "JSON nested too deeply") from e

        if not isinstance(data, dict):
            raise DecodeError(raw_json, "expected a JSON object")

        try:
            snapshot = cls.model_validate(data)
        except ValidationError as e:
            raise DecodeError(raw_json, f"{e.error_count()} validation error(s)") from e

        return snapshot.model_copy(update={"raw_json": raw_json})
