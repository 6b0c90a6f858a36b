"""Enumerates the legal choices for a request. Single battles only."""

from typing import List, Sequence

from turnsync.game.schema.request_snapshot import PokemonStatus, RequestSnapshot

DEFAULT_ACTION = "default"
MAX_MOVES = 4
MAX_TEAM_SIZE = 6


def get_action_space(request: RequestSnapshot) -> List[str]:
    """Return every legal action string for a request, in a fixed order.

    Order: plain moves, mega moves, Z-moves, then switches. Indices are 1-based
    as the simulator expects them.

    Args:
        request: The decoded request snapshot

    Returns:
        The ordered action space. Empty for wait requests, ["default"] for
        request shapes that are not understood (e.g. team preview).

    Examples:
        >>> get_action_space(RequestSnapshot(wait=True))
        []
        >>> get_action_space(RequestSnapshot(team_preview=True))
        ['default']
    """
    if request.force_switch:
        return _switch_actions(request.side.pokemon)

    if request.active:
        active = request.active[0]
        action_space: List[str] = []

        moves = [
            i
            for i in range(1, min(MAX_MOVES, len(active.moves)) + 1)
            if not active.moves[i - 1].disabled
        ]
        action_space.extend(f"move {i}" for i in moves)

        if active.can_mega_evo:
            action_space.extend(f"move {i} mega" for i in moves)

        # Z-move availability ignores the disabled flag of the base move.
        if active.can_z_move is not None:
            z_moves = [
                i
                for i in range(1, min(MAX_MOVES, len(active.can_z_move)) + 1)
                if active.can_z_move[i - 1]
            ]
            action_space.extend(f"move {i} zmove" for i in z_moves)

        action_space.extend(_switch_actions(request.side.pokemon))
        return action_space

    if request.wait:
        return []

    return [DEFAULT_ACTION]


def _switch_actions(pokemon: Sequence[PokemonStatus]) -> List[str]:
    """Switch targets: team slots that are neither active nor fainted."""
    return [
        f"switch {i}"
        for i in range(1, min(MAX_TEAM_SIZE, len(pokemon)) + 1)
        if not pokemon[i - 1].active and not pokemon[i - 1].is_fainted
    ]
