from hud.scene_hud import SceneHud
