import pygame


class HudText:
    """One line of text, static or pulled from ``text_source`` every frame."""

    def __init__(self, text="", text_source=None, color=(255, 255, 255), font_size=22):
        self._font = pygame.font.SysFont(None, font_size)
        self.text = text
        self.text_source = text_source
        self.color = color
        self.height = self._font.get_linesize()

    def render(self):
        display_text = self.text_source() if self.text_source else self.text
        return self._font.render(display_text, True, self.color)


class HudPanel:
    """Stacks HudText lines top to bottom over a translucent strip.

    bg_color: (r, g, b, a) tuple, alpha controls how much of the scene shows through.
    """

    def __init__(self, position=(0, 0), width=200, padding=8, bg_color=(0, 0, 0, 120)):
        self.position = pygame.Vector2(position)
        self.width = width
        self.padding = padding
        self.bg_color = bg_color
        self.lines = []
        self.visible = True

    def add(self, line):
        self.lines.append(line)
        return line

    def get_rect(self):
        height = self.padding * 2 + sum(line.height for line in self.lines)
        return pygame.Rect(self.position, (self.width, height))

    def draw(self, screen):
        if not self.visible:
            return
        rect = self.get_rect()

        strip = pygame.Surface(rect.size, pygame.SRCALPHA)
        strip.fill(self.bg_color)
        screen.blit(strip, rect.topleft)

        y = rect.y + self.padding
        for line in self.lines:
            screen.blit(line.render(), (rect.x + self.padding, y))
            y += line.height


class HudLayer:
    """Top-level manager that holds panels and draws them all."""

    def __init__(self):
        self.panels = []

    def add(self, panel):
        self.panels.append(panel)
        return panel

    def draw(self, screen):
        for panel in self.panels:
            panel.draw(screen)
