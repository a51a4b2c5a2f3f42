from types import SimpleNamespace

import pygame
import pytest

import main
from core.geometry import Point, degrees
from core.input_manager import InputManager
from core.wall_placer import WallPlacer
from maps import ReferenceScene, SceneBase


def test_defaults_load_reference_scene():
    args = main.build_parser().parse_args([])
    scene = main.load_scene(args)
    assert isinstance(scene, ReferenceScene)
    assert scene.jitter == pytest.approx(degrees(0.5))
    assert scene.enclosed


def test_flags_configure_scene(tmp_path):
    path = tmp_path / "scene.json"
    SceneBase(300, 300).to_json(path)

    args = main.build_parser().parse_args(
        ["--scene", str(path), "--jitter", "1", "--unbounded"]
    )
    scene = main.load_scene(args)
    assert type(scene) is SceneBase
    assert scene.jitter == pytest.approx(degrees(1))
    assert not scene.enclosed


def test_negative_jitter_is_rejected():
    with pytest.raises(SystemExit):
        main.main(["--jitter", "-1"])


def test_place_wall_adds_wall_on_second_click():
    scene = SceneBase(400, 400)
    placer = WallPlacer()
    assert main.place_wall(scene, placer, Point(-20, 0)) is None
    assert scene.walls == []

    wall = main.place_wall(scene, placer, Point(20, 0))
    assert scene.walls == [wall]
    assert wall.vector.length == pytest.approx(40)


def test_place_wall_skips_repeated_point():
    scene = SceneBase(400, 400)
    placer = WallPlacer()
    main.place_wall(scene, placer, Point(5, 5))
    assert main.place_wall(scene, placer, Point(5, 5)) is None
    assert scene.walls == []


@pytest.mark.parametrize(
    "event, expected",
    [
        (pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(10, 10)), True),
        (pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=3, pos=(10, 10)), False),
        (pygame.event.Event(pygame.MOUSEBUTTONUP, button=1, pos=(10, 10)), False),
        (pygame.event.Event(pygame.MOUSEMOTION, pos=(10, 10), rel=(1, 1), buttons=(0, 0, 0)), False),
    ],
)
def test_place_click_comes_from_button_down_events(event, expected):
    manager = SimpleNamespace(mouse_config={"place_button": 1})
    assert InputManager.is_place_click(manager, event) is expected
