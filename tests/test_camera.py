from core.camera import Camera
from core.geometry import Point


def test_world_origin_is_viewport_center():
    camera = Camera((800, 600))
    assert camera.to_screen(Point(0, 0)) == (400, 300)
    assert camera.from_screen((400, 300)) == Point(0, 0)


def test_screen_round_trip():
    camera = Camera((800, 600))
    point = Point(12.5, -40.25)
    assert camera.from_screen(camera.to_screen(point)) == point


def test_set_viewport_recenters():
    camera = Camera((800, 600))
    camera.set_viewport(200, 100)
    assert camera.to_screen(Point(-100, -50)) == (0, 0)
