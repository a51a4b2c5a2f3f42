from settings import WIDTH
from core.hud_base import HudLayer, HudPanel, HudText

HELP_TEXT = "move: observer   click x2: wall   R: rays   H: hud   S: save   C: cancel   Esc: quit"


class SceneHud(HudLayer):
    """Stats and key help, bound to scene data via callables."""

    def __init__(self, scene, clock, placer):
        super().__init__()

        top_bar = self.add(HudPanel(position=(0, 0), width=WIDTH))
        top_bar.add(HudText(text_source=lambda: stats_line(scene, clock, placer)))
        top_bar.add(HudText(text=HELP_TEXT, color=(200, 200, 200), font_size=18))


def stats_line(scene, clock, placer=None):
    visibility = scene.visibility
    rays = len(visibility.rays) if visibility else 0
    text = f"walls: {len(scene.walls)}   rays: {rays}   fps: {clock.get_fps():.0f}"
    if visibility and visibility.dropped:
        text += f"   dropped: {visibility.dropped} (scene not enclosed)"
    if placer is not None and placer.pending:
        lit = "lit" if scene.is_visible(placer.start) else "in shadow"
        text += f"   wall start: {lit}"
    return text
