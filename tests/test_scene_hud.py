from types import SimpleNamespace

from core.geometry import Line, Point, Vector, line_between
from core.wall_placer import WallPlacer
from hud.scene_hud import stats_line
from maps import SceneBase

CLOCK = SimpleNamespace(get_fps=lambda: 59.6)


def test_stats_line_before_first_frame():
    scene = SceneBase(200, 200)
    assert stats_line(scene, CLOCK) == "walls: 0   rays: 0   fps: 60"


def test_stats_line_reports_dropped_rays():
    scene = SceneBase(200, 200, enclosed=False)
    scene.add_wall(Line(Point(-50, 0), Vector(100, 0)))
    scene.move_observer(Point(0, -60))
    scene.update_visibility()

    text = stats_line(scene, CLOCK)
    assert text.startswith("walls: 1   rays: 4")
    assert "dropped: 2" in text


def test_stats_line_reports_whether_wall_start_is_lit():
    scene = SceneBase(400, 400)
    scene.add_wall(line_between(Point(-50, 0), Point(50, 0)))
    scene.move_observer(Point(0, -100))
    scene.update_visibility()
    placer = WallPlacer()
    assert "wall start" not in stats_line(scene, CLOCK, placer)

    placer.click(Point(0, -50))
    assert stats_line(scene, CLOCK, placer).endswith("wall start: lit")

    placer.cancel()
    placer.click(Point(0, 100))
    assert stats_line(scene, CLOCK, placer).endswith("wall start: in shadow")
