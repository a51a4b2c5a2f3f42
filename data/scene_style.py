# data/scene_style.py

SCENE_STYLE = {
    "wall": {
        "color": (0, 0, 0),
        "width": 8,
    },
    "pending_wall": {
        "color": (85, 87, 83),
        "width": 2,
        "dash_length": 10,
    },
    "polygon": {
        "color": (252, 233, 79),
    },
    "ray": {
        "color": (204, 0, 0),
        "width": 1,
    },
    "observer": {
        "color": (204, 0, 0),
        "radius": 5,
    },
}
