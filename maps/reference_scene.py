from maps.scene_base import SceneBase
from core.geometry import Line, Point, Vector, degrees
from settings import WIDTH, HEIGHT


class ReferenceScene(SceneBase):
    def __init__(self, **kwargs):
        super().__init__(width=WIDTH, height=HEIGHT, **kwargs)

        self._build_room()
        self._build_obstacles()

    def _build_room(self):
        # 600x600 room around the origin
        self.add_wall(Line(Point(-300, -300), Vector(600, degrees(0))))    # top
        self.add_wall(Line(Point(300, -300), Vector(600, degrees(90))))    # right
        self.add_wall(Line(Point(-300, -300), Vector(600, degrees(90))))   # left
        self.add_wall(Line(Point(300, 300), Vector(600, degrees(180))))    # bottom

    def _build_obstacles(self):
        self.add_wall(Line(Point(100, 100), Vector(50, degrees(315))))
        self.add_wall(Line(Point(-80, 100), Vector(50, degrees(290))))
        self.add_wall(Line(Point(-200, 180), Vector(150, degrees(250))))
        self.add_wall(Line(Point(150, -100), Vector(120, degrees(235))))
        self.add_wall(Line(Point(-230, -250), Vector(300, degrees(70))))
        self.add_wall(Line(Point(0, -150), Vector(300, degrees(30))))
