import pygame


class InputManager:
    def __init__(self):
        # -------------------------
        # Action → Key bindings
        # -------------------------
        self.keymap = {
            "quit": pygame.K_ESCAPE,
            "toggle_rays": pygame.K_r,
            "toggle_hud": pygame.K_h,
            "save": pygame.K_s,
            "cancel_wall": pygame.K_c,
        }

        # Initialize key states safely
        self.keys = pygame.key.get_pressed()
        self.prev_keys = self.keys

        # -------------------------
        # Mouse configuration
        # -------------------------
        self.mouse_config = {
            "grab": False,
            "visible": True,
            "place_button": 1,
        }

        pygame.event.set_grab(self.mouse_config["grab"])
        pygame.mouse.set_visible(self.mouse_config["visible"])

        self.mouse_pos = pygame.Vector2(pygame.mouse.get_pos())
        self.prev_mouse_pos = pygame.Vector2(self.mouse_pos)

    # =====================================================
    # UPDATE (call once per frame BEFORE reading input)
    # =====================================================

    def update(self):
        self.prev_keys = self.keys
        self.keys = pygame.key.get_pressed()
        self.prev_mouse_pos = self.mouse_pos
        self.mouse_pos = pygame.Vector2(pygame.mouse.get_pos())

    # =====================================================
    # PRESSED THIS FRAME (edge detection)
    # =====================================================

    def is_pressed(self, action):
        key = self.keymap.get(action)
        if key is None:
            return False

        return self.keys[key] and not self.prev_keys[key]

    # =====================================================
    # MOUSE
    # =====================================================

    def get_mouse_pos(self):
        return pygame.Vector2(self.mouse_pos)

    def mouse_moved(self):
        return self.mouse_pos != self.prev_mouse_pos

    def is_place_click(self, event):
        """True for a MOUSEBUTTONDOWN event of the wall-placement button."""
        return (event.type == pygame.MOUSEBUTTONDOWN
                and event.button == self.mouse_config["place_button"])
