"""
Main application for Rally Pong.
"""

from __future__ import annotations

from mini_arcade_core import (  # pyright: ignore[reportMissingImports]
    GameConfig,
    SceneRegistry,
    run_game,
)
from mini_arcade_core.utils import logger

# Justification: in editable installs, this module is provided by the package.
# pylint: disable=no-name-in-module
from mini_arcade_native_backend import (  # pyright: ignore[reportMissingImports]
    AudioSettings,
    BackendSettings,
    FontSettings,
    NativeBackend,
    RendererSettings,
    WindowSettings,
)

from rally_pong.constants import (
    ASSETS_ROOT,
    BACKGROUND,
    COLLISION_SOUNDS,
    FPS,
    WINDOW_SIZE,
)

# pylint: enable=no-name-in-module


def run():
    """
    Main entry point for Rally Pong.

    - Auto-discovers scenes from the `rally_pong.scenes` package.
    - Registers the collision blips with the native audio backend.
    - Runs the game straight into the "pong" scene.
    """
    scene_registry = SceneRegistry(_factories={}).discover(
        "rally_pong.scenes", "mini_arcade_core.scenes"
    )

    font_path = ASSETS_ROOT / "fonts" / "score.ttf"
    sounds = {
        name: str(ASSETS_ROOT / "sfx" / f"{name}.wav")
        for name in COLLISION_SOUNDS
    }

    w_width, w_height = WINDOW_SIZE
    backend_settings = BackendSettings(
        window=WindowSettings(
            width=w_width,
            height=w_height,
            title="Rally Pong",
            high_dpi=False,
        ),
        renderer=RendererSettings(background_color=BACKGROUND),
        fonts=[FontSettings(name="default", path=str(font_path), size=24)],
        audio=AudioSettings(
            enable=True,
            sounds=sounds,
        ),
    )
    backend = NativeBackend(settings=backend_settings)

    game_config = GameConfig(
        initial_scene="pong",
        fps=FPS,
        backend=backend,
    )
    logger.info("Starting Rally Pong...")
    run_game(game_config=game_config, scene_registry=scene_registry)


if __name__ == "__main__":
    run()
