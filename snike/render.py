import math
import pygame
from config import *
from snike.session import GameState

PLAYFIELD_STATES = (GameState.PLAYING, GameState.PAUSED, GameState.OVER)


def to_rgb(token, fallback=DEFAULT_COLOR):
    """Parse a color token such as '#00f2ff', falling back on bad input."""
    try:
        color = pygame.Color(token)
    except (ValueError, TypeError):
        color = pygame.Color(fallback)
    return (color.r, color.g, color.b)


def pad_score(score):
    return str(score).rjust(3, '0')


class Renderer:
    """Draws a FrameSnapshot. Holds fonts and cached backgrounds, no game state."""

    def __init__(self, screen):
        self.screen = screen
        self.font = pygame.font.Font(None, 48)
        self.small_font = pygame.font.Font(None, 28)
        self.tiny_font = pygame.font.Font(None, 20)
        self._grid_cache = {}

    def draw_text(self, text, pos, color=WHITE, font=None):
        """Draw text centered on pos."""
        if font is None:
            font = self.font
        text_surface = font.render(text, True, color)
        text_rect = text_surface.get_rect(center=pos)
        self.screen.blit(text_surface, text_rect)

    def _grid(self, width, height, color):
        key = (width, height, color)
        if key not in self._grid_cache:
            surf = pygame.Surface((width, height), pygame.SRCALPHA)
            for x in range(0, width, GRID_SPACING):
                pygame.draw.line(surf, color, (x, 0), (x, height))
            for y in range(0, height, GRID_SPACING):
                pygame.draw.line(surf, color, (0, y), (width, y))
            self._grid_cache = {key: surf}
        return self._grid_cache[key]

    def draw_background(self, snap):
        """Fill and grid for the selected theme."""
        width, height = int(snap.width), int(snap.height)
        if snap.theme == 'neon':
            self.screen.fill(NEON_BACKGROUND)
            self.screen.blit(self._grid(width, height, NEON_GRID_COLOR), (0, 0))
        elif snap.theme == 'void':
            self.screen.fill(BLACK)
        else:
            self.screen.fill(BLACK)
            self.screen.blit(self._grid(width, height, SPACE_GRID_COLOR), (0, 0))

    def _glow(self, center, radius, color, extra=GLOW_INTENSITY // 3):
        """Soft halo: concentric translucent circles around center."""
        r_max = int(radius + extra)
        if r_max <= 0:
            return
        surf = pygame.Surface((r_max * 2, r_max * 2), pygame.SRCALPHA)
        for r in range(r_max, int(radius), -1):
            alpha = int(max(0, min(255, 90 * (1 - (r - radius) / extra))))
            pygame.draw.circle(surf, (*color, alpha), (r_max, r_max), r)
        self.screen.blit(surf, (center[0] - r_max, center[1] - r_max))

    def draw_food(self, snap):
        """Diamond that bobs up and down with the food phase."""
        x, y = snap.food
        bounce = math.sin(snap.food_phase) * 3
        color = to_rgb(ACCENT_NEON)
        self._glow((x, y + bounce), FOOD_SIZE * 0.7, color, extra=8)
        points = [
            (x, y - FOOD_SIZE + bounce),
            (x + FOOD_SIZE, y + bounce),
            (x, y + FOOD_SIZE + bounce),
            (x - FOOD_SIZE, y + bounce),
        ]
        pygame.draw.polygon(self.screen, color, points)

    def draw_snake(self, snap):
        color = to_rgb(snap.color)
        points = [(int(px), int(py)) for px, py in snap.trail]
        if len(points) >= 2:
            glow = pygame.Surface(self.screen.get_size(), pygame.SRCALPHA)
            pygame.draw.lines(glow, (*color, 60), False, points, SNAKE_WIDTH + 8)
            self.screen.blit(glow, (0, 0))
            pygame.draw.lines(self.screen, color, False, points, SNAKE_WIDTH)
            # Round caps at both ends
            pygame.draw.circle(self.screen, color, points[-1], SNAKE_WIDTH // 2)
        head = (int(snap.head[0]), int(snap.head[1]))
        pygame.draw.circle(self.screen, WHITE, head, int(SNAKE_WIDTH / 1.5))

    def draw_particles(self, snap):
        for x, y, life, token in snap.particles:
            alpha = int(max(0.0, min(1.0, life)) * 255)
            surf = pygame.Surface((6, 6), pygame.SRCALPHA)
            pygame.draw.circle(surf, (*to_rgb(token), alpha), (3, 3), 2)
            self.screen.blit(surf, (int(x) - 3, int(y) - 3))

    def draw_gravity_icon(self, snap, center):
        """Arrow pointing along the active gravity, rotated like the HUD glyph."""
        size = 28
        arrow = pygame.Surface((size, size), pygame.SRCALPHA)
        color = to_rgb(SECONDARY_NEON)
        pygame.draw.rect(arrow, color, (size // 2 - 3, 2, 6, size // 2))
        pygame.draw.polygon(arrow, color, [(4, size // 2), (size - 4, size // 2), (size // 2, size - 2)])
        # Rotations are clockwise degrees; pygame rotates counter-clockwise
        arrow = pygame.transform.rotate(arrow, -snap.gravity.rotation)
        self.screen.blit(arrow, arrow.get_rect(center=center))

    def draw_hud(self, snap):
        width = int(snap.width)
        score = self.small_font.render(f"SCORE {pad_score(snap.score)}", True, WHITE)
        self.screen.blit(score, (12, 10))
        best = self.small_font.render(f"BEST {pad_score(snap.high_score)}", True, WHITE)
        self.screen.blit(best, (12, 10 + score.get_height() + 4))

        if snap.name:
            user = self.tiny_font.render(snap.name, True, to_rgb(PRIMARY_NEON))
            self.screen.blit(user, (width - user.get_width() - 12, 10))

        label = self.tiny_font.render(f"GRAVITY: {snap.gravity.name}", True, WHITE)
        self.screen.blit(label, label.get_rect(center=(width // 2, 14)))
        self.draw_gravity_icon(snap, (width // 2, 42))

    def draw_gravity_flash(self, snap):
        """Brief white flash after every gravity flip."""
        since = snap.since_gravity_flip
        if since is None or since >= GRAVITY_FLASH_DURATION:
            return
        alpha = int(80 * (1 - since / GRAVITY_FLASH_DURATION))
        flash = pygame.Surface(self.screen.get_size(), pygame.SRCALPHA)
        flash.fill((255, 255, 255, alpha))
        self.screen.blit(flash, (0, 0))

    def draw_pad(self, pad):
        """On-screen arrows and the flip button."""
        outline = to_rgb(PRIMARY_NEON)
        for name, rect in pad.buttons.items():
            if pad.pressed == name:
                pygame.draw.rect(self.screen, outline, rect, border_radius=6)
            pygame.draw.rect(self.screen, outline, rect, 2, border_radius=6)
        pygame.draw.rect(self.screen, to_rgb(SECONDARY_NEON), pad.flip_button, 2, border_radius=6)
        self.draw_text("FLIP", pad.flip_button.center, WHITE, self.tiny_font)

    def _dim(self):
        overlay = pygame.Surface(self.screen.get_size(), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 160))
        self.screen.blit(overlay, (0, 0))

    def draw_overlay(self, snap, name_buffer=''):
        """Menu screens for every state except PLAYING."""
        cx, cy = int(snap.width) // 2, int(snap.height) // 2
        primary = to_rgb(PRIMARY_NEON)
        accent = to_rgb(ACCENT_NEON)

        if snap.state is GameState.AUTH:
            self.draw_text("ANTI-GRAVITY SNAKE", (cx, cy - 90), primary)
            self.draw_text("Enter your name", (cx, cy - 30), WHITE, self.small_font)
            box = pygame.Rect(0, 0, 320, 44)
            box.center = (cx, cy + 20)
            pygame.draw.rect(self.screen, primary, box, 2, border_radius=6)
            self.draw_text(name_buffer + "_", box.center, WHITE, self.small_font)
            self.draw_text("Press ENTER to continue", (cx, cy + 80), accent, self.tiny_font)

        elif snap.state is GameState.START:
            self.draw_text("ANTI-GRAVITY SNAKE", (cx, cy - 80), primary)
            self.draw_text(f"Welcome, {snap.name}", (cx, cy - 30), WHITE, self.small_font)
            self.draw_text("ENTER start | C customize | Q quit", (cx, cy + 30), accent, self.small_font)
            self.draw_text("Arrows/WASD steer, SPACE flips gravity, ESC pauses",
                           (cx, cy + 70), WHITE, self.tiny_font)

        elif snap.state is GameState.CUSTOMIZE:
            self.draw_text("CUSTOMIZE", (cx, cy - 120), primary)
            self.draw_text("Color (LEFT/RIGHT)", (cx, cy - 60), WHITE, self.small_font)
            swatch = 36
            start_x = cx - (len(COLOR_OPTIONS) * (swatch + 12)) // 2
            for i, token in enumerate(COLOR_OPTIONS):
                rect = pygame.Rect(start_x + i * (swatch + 12), cy - 35, swatch, swatch)
                pygame.draw.rect(self.screen, to_rgb(token), rect, border_radius=6)
                if token == snap.color:
                    pygame.draw.rect(self.screen, WHITE, rect.inflate(8, 8), 2, border_radius=8)
            self.draw_text("Theme (UP/DOWN)", (cx, cy + 30), WHITE, self.small_font)
            for i, theme in enumerate(THEMES):
                color = accent if theme == snap.theme else WHITE
                self.draw_text(theme.upper(), (cx + (i - 1) * 110, cy + 65), color, self.small_font)
            self.draw_text("ESC back", (cx, cy + 120), accent, self.tiny_font)

        elif snap.state is GameState.PAUSED:
            self._dim()
            self.draw_text("PAUSED", (cx, cy - 30), primary)
            self.draw_text("ESC resume | C customize", (cx, cy + 20), accent, self.small_font)

        elif snap.state is GameState.OVER:
            self._dim()
            self.draw_text("GAME OVER", (cx, cy - 60), accent)
            self.draw_text(f"Final Score: {snap.score}", (cx, cy), WHITE, self.small_font)
            self.draw_text("ENTER restart | C customize", (cx, cy + 50), primary, self.small_font)

    def draw(self, snap, pad=None, name_buffer=''):
        self.draw_background(snap)
        if snap.state in PLAYFIELD_STATES:
            self.draw_food(snap)
            self.draw_snake(snap)
            self.draw_particles(snap)
            self.draw_hud(snap)
            self.draw_gravity_flash(snap)
            if pad is not None and snap.state is GameState.PLAYING:
                self.draw_pad(pad)
        if snap.state is not GameState.PLAYING:
            self.draw_overlay(snap, name_buffer)
