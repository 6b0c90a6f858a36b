"""Battle log shared between the synchronizer and decision delegates."""

from turnsync.game.environment.battle_log import BattleLog

__all__ = ["BattleLog"]
