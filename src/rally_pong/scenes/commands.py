"""
Module defining game commands for Rally Pong.
"""

from __future__ import annotations

from mini_arcade_core.engine.commands import Command, CommandContext


class ResumeRoundCommand(Command):
    """
    Command to leave the pause entered after a point.
    """

    def execute(self, context: CommandContext):
        world = context.world
        if world is None:
            return

        world.match.resume()


class RestartMatchCommand(Command):
    """
    Command to zero the score and restart the match, paused.
    """

    def execute(self, context: CommandContext):
        world = context.world
        if world is None:
            return

        world.match.restart()
