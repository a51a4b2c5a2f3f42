import argparse
import logging
import sys

import pygame

from settings import WIDTH, HEIGHT, FPS, BACKGROUND_COLOR, RAY_JITTER_DEGREES, DEFAULT_SAVE_PATH

from core.camera import Camera
from core.geometry import degrees
from core.input_manager import InputManager
from core.wall_placer import WallPlacer

from maps import ReferenceScene, SceneBase
from hud import SceneHud

logger = logging.getLogger(__name__)


def _configure_logging(level):
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def build_parser():
    parser = argparse.ArgumentParser(description="Interactive 2D visibility polygon sandbox")
    parser.add_argument("--scene", type=str, default=None,
                        help="JSON scene file to load instead of the reference scene")
    parser.add_argument("--jitter", type=float, default=RAY_JITTER_DEGREES,
                        help=f"Angular offset of sibling rays in degrees (default: {RAY_JITTER_DEGREES})")
    parser.add_argument("--unbounded", action="store_true",
                        help="Do not enclose the scene with its bounding rectangle")
    parser.add_argument("--save", type=str, default=DEFAULT_SAVE_PATH,
                        help=f"File written when pressing S (default: {DEFAULT_SAVE_PATH})")
    parser.add_argument("--log-level", default="INFO",
                        help="Logging level (default: INFO)")
    return parser


def load_scene(args):
    options = {"jitter": degrees(args.jitter), "enclosed": not args.unbounded}
    if args.scene:
        return SceneBase.from_json(args.scene, **options)
    return ReferenceScene(**options)


def place_wall(scene, placer, point):
    """Feed a placement click to ``placer``; add the finished wall to ``scene``."""
    wall = placer.click(point)
    if wall is not None:
        scene.add_wall(wall)
        end = wall.end()
        logger.info("Added wall from (%.1f, %.1f) to (%.1f, %.1f)",
                    wall.position.x, wall.position.y, end.x, end.y)
    return wall


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.log_level)

    if args.jitter < 0:
        parser.error("--jitter must be >= 0")

    scene = load_scene(args)

    pygame.init()

    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption("Raycast Sandbox")

    clock = pygame.time.Clock()

    camera = Camera()
    input_manager = InputManager()
    placer = WallPlacer()
    hud = SceneHud(scene, clock, placer)

    show_rays = False
    show_hud = True
    running = True

    while running:
        clock.tick(FPS)

        # -----------------------------
        # Events
        # -----------------------------
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif input_manager.is_place_click(event):
                place_wall(scene, placer, camera.from_screen(event.pos))

        # -----------------------------
        # Input
        # -----------------------------
        input_manager.update()
        mouse_world = camera.from_screen(input_manager.get_mouse_pos())

        if input_manager.is_pressed("quit"):
            running = False
        if input_manager.is_pressed("toggle_rays"):
            show_rays = not show_rays
        if input_manager.is_pressed("toggle_hud"):
            show_hud = not show_hud
        if input_manager.is_pressed("cancel_wall"):
            placer.cancel()
        if input_manager.is_pressed("save"):
            scene.to_json(args.save)

        if input_manager.mouse_moved():
            scene.move_observer(mouse_world)

        # -----------------------------
        # Update
        # -----------------------------
        scene.update_visibility()

        # -----------------------------
        # Draw
        # -----------------------------
        screen.fill(BACKGROUND_COLOR)
        scene.draw(screen, camera, show_rays, placer.preview(mouse_world))
        if show_hud:
            hud.draw(screen)

        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
