"""
Rally Pong scene using mini-arcade-core.
"""

from __future__ import annotations

from dataclasses import dataclass

from mini_arcade_core.backend import Backend
from mini_arcade_core.backend.keys import Key
from mini_arcade_core.engine.commands import QuitCommand
from mini_arcade_core.scenes.autoreg import (  # pyright: ignore[reportMissingImports]
    register_scene,
)
from mini_arcade_core.scenes.sim_scene import (  # pyright: ignore[reportMissingImports]
    Drawable,
    DrawCall,
    SimScene,
)
from mini_arcade_core.scenes.systems.builtins import (
    BaseRenderSystem,
    InputIntentSystem,
)
from mini_arcade_core.utils import logger

from rally_pong.constants import (
    BOARD_COLOR,
    DIM,
    SCORE_BAR_COLOR,
    SCORE_BAR_HEIGHT,
    WHITE,
)
from rally_pong.entities import Body
from rally_pong.match import PongMatch
from rally_pong.scenes.commands import ResumeRoundCommand, RestartMatchCommand
from rally_pong.scenes.pong.models import (
    PongIntent,
    PongTickContext,
    PongWorld,
)


@dataclass
class PongInputSystem(InputIntentSystem):
    """
    Process input and update intent.
    """

    name: str = "pong_input"

    def build_intent(self, ctx: PongTickContext):
        """Process input and update intent."""
        down = ctx.input_frame.keys_down
        pressed = ctx.input_frame.keys_pressed

        return PongIntent(
            move_up=Key.UP in down,
            move_down=Key.DOWN in down,
            resume=Key.P in pressed,
            restart=Key.R in pressed,
            quit=Key.ESCAPE in pressed,
        )


@dataclass
class PongCommandSystem:
    """Turns one-shot intents (resume, restart, quit) into commands."""

    name: str = "pong_commands"
    order: int = 12  # right after input

    def step(self, ctx: PongTickContext):
        """Push commands for this tick's one-shot intents."""
        if ctx.intent is None:
            return

        if ctx.intent.quit:
            ctx.commands.push(QuitCommand())
            return

        # resume first so a restart in the same frame leaves the match paused
        if ctx.intent.resume:
            ctx.commands.push(ResumeRoundCommand())

        if ctx.intent.restart:
            ctx.commands.push(RestartMatchCommand())


@dataclass
class PongMatchSystem:
    """
    Advance the match: paddles, ball, then scoring.
    """

    name: str = "pong_match"
    order: int = 20

    def step(self, ctx: PongTickContext):
        """Advance the match by one frame."""
        ctx.world.elapsed += ctx.dt

        if ctx.intent is None:
            return

        ctx.world.match.step(
            ctx.dt,
            ctx.world.elapsed,
            ctx.intent.move_up,
            ctx.intent.move_down,
        )


def _draw_centered(backend: Backend, body: Body, color):
    x, y = body.top_left.to_tuple()
    w, h = body.size.to_tuple()
    backend.render.draw_rect(int(x), int(y), int(w), int(h), color=color)


class DrawBoard(Drawable[PongTickContext]):
    """
    Drawable to render the play field.
    """

    def draw(self, backend: Backend, ctx: PongTickContext):
        bounds = ctx.world.match.bounds
        backend.render.draw_rect(
            int(bounds.minimum.x),
            int(bounds.minimum.y),
            int(bounds.width),
            int(bounds.height),
            color=BOARD_COLOR,
        )

        # center line
        x = int(bounds.minimum.x + bounds.width / 2) - 2
        y = bounds.minimum.y
        while y < bounds.maximum.y:
            backend.render.draw_rect(x, int(y), 4, 16, color=DIM)
            y += 28


class DrawScoreBar(Drawable[PongTickContext]):
    """
    Drawable to render the score bar: CPU score, elapsed seconds, player
    score.
    """

    def draw(self, backend: Backend, ctx: PongTickContext):
        vw, _ = ctx.world.viewport
        score = ctx.world.match.score

        backend.render.draw_rect(
            0, 0, int(vw), SCORE_BAR_HEIGHT, color=SCORE_BAR_COLOR
        )

        center_x = vw // 2
        text_y = SCORE_BAR_HEIGHT // 2 - 12

        enemy_text = str(score.enemy)
        enemy_w, _ = backend.text.measure(enemy_text)
        backend.text.draw(
            center_x - 100 - enemy_w, text_y, enemy_text, color=WHITE
        )

        clock_text = str(int(ctx.world.elapsed))
        clock_w, _ = backend.text.measure(clock_text)
        backend.text.draw(
            center_x - clock_w // 2, text_y, clock_text, color=DIM
        )

        backend.text.draw(center_x + 100, text_y, str(score.player), color=WHITE)


class DrawPlayer(Drawable[PongTickContext]):
    """
    Drawable to render the player paddle.
    """

    def draw(self, backend: Backend, ctx: PongTickContext):
        _draw_centered(backend, ctx.world.match.player, WHITE)


class DrawEnemy(Drawable[PongTickContext]):
    """
    Drawable to render the CPU paddle.
    """

    def draw(self, backend: Backend, ctx: PongTickContext):
        _draw_centered(backend, ctx.world.match.enemy, WHITE)


class DrawBall(Drawable[PongTickContext]):
    """
    Drawable to render the ball.
    """

    def draw(self, backend: Backend, ctx: PongTickContext):
        _draw_centered(backend, ctx.world.match.ball, WHITE)


@dataclass
class PongRenderSystem(BaseRenderSystem):
    """
    Render the Pong world.
    """

    name: str = "pong_render"
    order: int = 100

    def step(self, ctx: PongTickContext):
        """Render the Pong world."""

        ctx.draw_ops = [
            DrawCall(drawable=DrawBoard(), ctx=ctx),
            DrawCall(drawable=DrawScoreBar(), ctx=ctx),
            DrawCall(drawable=DrawPlayer(), ctx=ctx),
            DrawCall(drawable=DrawEnemy(), ctx=ctx),
            DrawCall(drawable=DrawBall(), ctx=ctx),
        ]
        super().step(ctx)


@register_scene("pong")
class PongScene(SimScene[PongTickContext, PongWorld]):
    """
    The match scene: human paddle on the right, CPU on the left.
    """

    tick_context_type = PongTickContext

    def on_enter(self):
        # Justification: window typer is protocol, mypy can't infer correctly
        # pylint: disable=assignment-from-no-return
        vw, vh = self.context.services.window.get_virtual_size()
        # pylint: enable=assignment-from-no-return

        self.world = PongWorld(
            viewport=(vw, vh),
            match=PongMatch(
                vw,
                vh,
                self.context.services.audio,
                score_bar_height=SCORE_BAR_HEIGHT,
            ),
        )
        logger.info(f"Match started on a {vw}x{vh} board")

        self.systems.extend(
            [
                PongInputSystem(),
                PongCommandSystem(),
                PongMatchSystem(),
                PongRenderSystem(),
            ]
        )
