from maps.scene_base import SceneBase, SceneFormatError
from maps.reference_scene import ReferenceScene
