"""Runs an agent against a simulator player stream on stdin/stdout.

The simulator side writes protocol chunks (blank-line separated) to this
process's stdin and reads one choice per line from its stdout. Logs go to
stderr.
"""

import asyncio
import time
from typing import List

from absl import app, flags, logging

from turnsync.agents.agent_registry import AgentRegistry
from turnsync.battle.turn_synchronizer import TurnSynchronizer
from turnsync.game.protocol.battle_line_logger import BattleLineLogger
from turnsync.game.protocol.message_parser import MessageParser
from turnsync.game.protocol.stdio_stream import StdioPlayerStream

FLAGS = flags.FLAGS

flags.DEFINE_string(
    "agent",
    "first_move",
    f"Agent type to use. Available: {', '.join(AgentRegistry.get_available_agents())}",
)
flags.DEFINE_integer(
    "seed",
    None,
    "Random seed for agents that make random choices (default: unseeded)",
)
flags.DEFINE_bool(
    "log_lines",
    False,
    "Log every received protocol line to <log_dir>/<agent>_<epoch>.txt",
)
flags.DEFINE_string(
    "log_dir",
    "/tmp/logs",
    "Directory for protocol line logs",
)
flags.DEFINE_list(
    "extra_battle_update_commands",
    [],
    "Additional protocol commands that count as battle updates (e.g. 'cant,drag')",
)


async def run_agent() -> None:
    """Run the configured agent until the simulator closes the stream."""
    logging.info("Creating agent: %s", FLAGS.agent)
    try:
        agent = AgentRegistry.create_agent(FLAGS.agent, seed=FLAGS.seed)
        logging.info("Agent created successfully: %s", type(agent).__name__)
    except ValueError as e:
        logging.error("%s", e)
        return

    line_logger = None
    if FLAGS.log_lines:
        line_logger = BattleLineLogger(FLAGS.agent, int(time.time()), FLAGS.log_dir)
        logging.info("Line logging enabled: %s", line_logger.filepath)

    parser = MessageParser(
        extra_battle_update_commands=FLAGS.extra_battle_update_commands,
        line_observer=line_logger,
    )
    stream = await StdioPlayerStream.from_stdio()
    synchronizer = TurnSynchronizer(stream, agent, parser=parser)

    try:
        decisions = await synchronizer.run()
        logging.info("Battle stream ended after %d decisions", decisions)
    finally:
        if line_logger:
            line_logger.close()


def main(argv: List[str]) -> None:
    """Entry point for the script."""
    del argv
    logging.info("Starting run_agent script")
    asyncio.run(run_agent())


def run() -> None:
    """Console script entry point."""
    app.run(main)


if __name__ == "__main__":
    run()
