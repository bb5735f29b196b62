import pygame
from crown_defense.config.settings import (
    SCREEN_WIDTH, SCREEN_HEIGHT, FIELD_HEIGHT, HUD_HEIGHT,
    COLOR_BG, COLOR_PATH, COLOR_CROWN, COLOR_WHITE, COLOR_TEXT,
    COLOR_TEXT_DIM, COLOR_HUD_BG, COLOR_BUTTON, COLOR_BUTTON_SELECTED,
    COLOR_BUTTON_DISABLED, COLOR_HP_BAR, COLOR_HP_BAR_BG, COLOR_DANGER,
)
from crown_defense.config.tower_data import TOWERS


class GameRenderer:
    """Draws session snapshots. Never touches the session itself."""

    def __init__(self, screen, game_map):
        self.screen = screen
        self.map = game_map
        self.font_large = pygame.font.SysFont("arial", 36, bold=True)
        self.font_med = pygame.font.SysFont("arial", 20, bold=True)
        self.font_small = pygame.font.SysFont("arial", 16)
        self.font_tiny = pygame.font.SysFont("arial", 12)

    # ── Playfield ─────────────────────────────────────────────

    def draw_field(self, game_state):
        self.screen.fill(COLOR_BG)
        self._draw_path()
        self._draw_crown()
        # Draw order: towers, then enemies, then projectiles on top
        for t in game_state.get("towers", []):
            self._draw_tower(t)
        for e in game_state.get("enemies", []):
            self._draw_enemy(e)
        for p in game_state.get("projectiles", []):
            pygame.draw.circle(self.screen, p["color"],
                               (int(p["x"]), int(p["y"])), p["size"])

    def _draw_path(self):
        points = [(int(x), int(y)) for x, y in self.map.waypoints]
        width = int(self.map.path_width)
        pygame.draw.lines(self.screen, COLOR_PATH, False, points, width)
        # Round joints and caps
        for p in points:
            pygame.draw.circle(self.screen, COLOR_PATH, p, width // 2)

    def _draw_crown(self):
        c = self.map.crown
        rect = pygame.Rect(c["x"], c["y"], c["w"], c["h"])
        pygame.draw.rect(self.screen, COLOR_CROWN, rect)
        pygame.draw.rect(self.screen, COLOR_WHITE, rect, 2)

    def _draw_tower(self, t):
        x, y = int(t["x"]), int(t["y"])
        pygame.draw.rect(self.screen, t["color"], (x - 15, y - 15, 30, 30))
        level = self.font_tiny.render(str(t["level"]), True, COLOR_WHITE)
        self.screen.blit(level, (x - level.get_width() // 2, y - level.get_height() // 2))

    def _draw_enemy(self, e):
        x, y, r = int(e["x"]), int(e["y"]), e["radius"]
        pygame.draw.circle(self.screen, e["color"], (x, y), r)
        pygame.draw.circle(self.screen, COLOR_WHITE, (x, y), r, 1)

        # HP bar
        ratio = max(0.0, e["hp"] / e["max_hp"]) if e["max_hp"] else 0.0
        bar_w = r * 2
        bar_y = y - r - 6
        pygame.draw.rect(self.screen, COLOR_HP_BAR_BG, (x - r, bar_y, bar_w, 3))
        pygame.draw.rect(self.screen, COLOR_HP_BAR, (x - r, bar_y, int(bar_w * ratio), 3))

    def draw_range_preview(self, x, y, tower_type, valid):
        """Ghost of the selected tower under the cursor."""
        stats = TOWERS[tower_type]
        overlay = pygame.Surface((SCREEN_WIDTH, FIELD_HEIGHT), pygame.SRCALPHA)
        color = (0, 255, 0, 40) if valid else (255, 0, 0, 40)
        pygame.draw.circle(overlay, color, (x, y), stats["range"])
        pygame.draw.rect(overlay, color[:3] + (120,), (x - 15, y - 15, 30, 30))
        self.screen.blit(overlay, (0, 0))

    # ── HUD ───────────────────────────────────────────────────

    def draw_hud(self, game_state, tower_buttons, wave_button, info_text):
        hud_y = FIELD_HEIGHT
        pygame.draw.rect(self.screen, COLOR_HUD_BG, (0, hud_y, SCREEN_WIDTH, HUD_HEIGHT))
        pygame.draw.line(self.screen, (80, 80, 130), (0, hud_y), (SCREEN_WIDTH, hud_y), 2)

        stats = (f"Lives: {game_state['lives']}    "
                 f"Money: {int(game_state['money'])}    "
                 f"Wave: {game_state['wave_number']}")
        text = self.font_med.render(stats, True, COLOR_TEXT)
        self.screen.blit(text, (12, hud_y + 8))

        info = self.font_small.render(info_text, True, COLOR_TEXT_DIM)
        self.screen.blit(info, (12, hud_y + 44))

        self._draw_tower_buttons(tower_buttons, game_state["selection"], game_state["money"])
        self._draw_wave_button(wave_button, game_state["wave_active"])

    def _draw_tower_buttons(self, buttons, selected_type, money):
        for i, (tower_type, rect) in enumerate(buttons):
            stats = TOWERS[tower_type]
            can_afford = money >= stats["cost"]
            if tower_type == selected_type:
                bg = COLOR_BUTTON_SELECTED
            elif can_afford:
                bg = COLOR_BUTTON
            else:
                bg = COLOR_BUTTON_DISABLED
            pygame.draw.rect(self.screen, bg, rect, border_radius=4)
            pygame.draw.rect(self.screen, stats["color"], rect, 2, border_radius=4)
            label = self.font_small.render(
                f"[{i + 1}] {stats['name']} ${stats['cost']}", True,
                COLOR_TEXT if can_afford else COLOR_TEXT_DIM)
            self.screen.blit(label, (rect.x + 8, rect.y + (rect.h - label.get_height()) // 2))

    def _draw_wave_button(self, rect, wave_active):
        if wave_active:
            bg, label, color = COLOR_BUTTON_DISABLED, "DEFEND!", COLOR_DANGER
        else:
            bg, label, color = COLOR_BUTTON, "START WAVE", COLOR_TEXT
        pygame.draw.rect(self.screen, bg, rect, border_radius=4)
        pygame.draw.rect(self.screen, color, rect, 2, border_radius=4)
        text = self.font_med.render(label, True, color)
        self.screen.blit(text, (rect.x + (rect.w - text.get_width()) // 2,
                                rect.y + (rect.h - text.get_height()) // 2))

    def draw_notifications(self, notifications):
        y = 12
        for text_str, _remaining in notifications[-3:]:
            text = self.font_small.render(text_str, True, COLOR_CROWN)
            banner = pygame.Surface((text.get_width() + 20, 24), pygame.SRCALPHA)
            banner.fill((0, 0, 0, 140))
            banner.blit(text, (10, 3))
            self.screen.blit(banner, ((SCREEN_WIDTH - banner.get_width()) // 2, y))
            y += 28

    # ── Screens ───────────────────────────────────────────────

    def draw_setup(self, difficulty_buttons, health_buttons, start_button,
                   difficulty, health_mode, ready):
        self.screen.fill(COLOR_BG)
        title = self.font_large.render("CROWN DEFENSE", True, COLOR_CROWN)
        self.screen.blit(title, ((SCREEN_WIDTH - title.get_width()) // 2, 70))

        self._draw_choice_row("Difficulty", difficulty_buttons, difficulty, 170)
        self._draw_choice_row("Health", health_buttons, health_mode, 300)

        if difficulty is not None:
            status = f"Selected: {difficulty.upper()}"
            if health_mode is not None:
                status += "  |  " + ("100 HP" if health_mode else "1 Hit KO")
            text = self.font_small.render(status, True, COLOR_TEXT_DIM)
            self.screen.blit(text, ((SCREEN_WIDTH - text.get_width()) // 2, 430))

        bg = COLOR_BUTTON_SELECTED if ready else COLOR_BUTTON_DISABLED
        pygame.draw.rect(self.screen, bg, start_button, border_radius=6)
        label = self.font_med.render("START GAME", True, COLOR_TEXT if ready else COLOR_TEXT_DIM)
        self.screen.blit(label, (start_button.x + (start_button.w - label.get_width()) // 2,
                                 start_button.y + (start_button.h - label.get_height()) // 2))

    def _draw_choice_row(self, heading, buttons, current, y):
        text = self.font_med.render(heading, True, COLOR_TEXT)
        self.screen.blit(text, ((SCREEN_WIDTH - text.get_width()) // 2, y))
        for value, label, rect in buttons:
            bg = COLOR_BUTTON_SELECTED if value == current else COLOR_BUTTON
            pygame.draw.rect(self.screen, bg, rect, border_radius=6)
            surf = self.font_small.render(label, True, COLOR_TEXT)
            self.screen.blit(surf, (rect.x + (rect.w - surf.get_width()) // 2,
                                    rect.y + (rect.h - surf.get_height()) // 2))

    def draw_game_over(self, wave_number):
        overlay = pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 170))
        self.screen.blit(overlay, (0, 0))

        title = self.font_large.render("GAME OVER", True, COLOR_DANGER)
        self.screen.blit(title, ((SCREEN_WIDTH - title.get_width()) // 2, 250))
        reached = self.font_med.render(f"You reached wave {wave_number}", True, COLOR_TEXT)
        self.screen.blit(reached, ((SCREEN_WIDTH - reached.get_width()) // 2, 310))
        restart = self.font_small.render("Press SPACE to return to setup", True, COLOR_TEXT_DIM)
        self.screen.blit(restart, ((SCREEN_WIDTH - restart.get_width()) // 2, 350))
