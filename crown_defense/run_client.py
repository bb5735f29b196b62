#!/usr/bin/env python3
"""Crown Defense - pygame front end."""
import sys

import pygame

from crown_defense.config.settings import (
    SCREEN_WIDTH, SCREEN_HEIGHT, FIELD_HEIGHT, FPS, DIFFICULTY_ORDER,
)
from crown_defense.config.tower_data import TOWERS, TOWER_ORDER
from crown_defense.core.errors import describe
from crown_defense.core.game import GameSession
from crown_defense.core.game_map import GameMap
from crown_defense.core.placement import validate_placement
from crown_defense.ui.renderer import GameRenderer

TOWER_KEYS = {pygame.K_1: 0, pygame.K_2: 1}


class CrownDefenseClient:
    def __init__(self, map_path=None, seed=None):
        pygame.init()
        pygame.display.set_caption("Crown Defense")
        self.screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        self.clock = pygame.time.Clock()
        self.map = GameMap.load_from_json(map_path) if map_path else GameMap.load_default()
        self.renderer = GameRenderer(self.screen, self.map)
        self.seed = seed

        self.running = True
        self.game = None
        self.info_text = ""

        # Setup screen choices, applied together on START GAME
        self.difficulty = None
        self.health_mode = None

        self._build_ui_rects()
        self._new_session()

    def _build_ui_rects(self):
        hud_y = FIELD_HEIGHT

        self.tower_buttons = []
        for i, ttype in enumerate(TOWER_ORDER):
            rect = pygame.Rect(380 + i * 150, hud_y + 8, 140, 30)
            self.tower_buttons.append((ttype, rect))
        self.wave_button = pygame.Rect(380, hud_y + 42, 290, 32)

        btn_w, btn_h = 160, 50
        row_x = (SCREEN_WIDTH - 3 * btn_w - 40) // 2
        self.difficulty_buttons = [
            (d, d.capitalize(), pygame.Rect(row_x + i * (btn_w + 20), 210, btn_w, btn_h))
            for i, d in enumerate(DIFFICULTY_ORDER)
        ]
        pair_x = (SCREEN_WIDTH - 2 * btn_w - 20) // 2
        self.health_buttons = [
            (True, "100 HP", pygame.Rect(pair_x, 340, btn_w, btn_h)),
            (False, "1 Hit KO", pygame.Rect(pair_x + btn_w + 20, 340, btn_w, btn_h)),
        ]
        self.start_button = pygame.Rect((SCREEN_WIDTH - 240) // 2, 480, 240, 60)

    def _new_session(self):
        self.game = GameSession(self.map, seed=self.seed)
        self.info_text = ""

    @property
    def ready(self):
        return self.difficulty is not None and self.health_mode is not None

    def run(self):
        while self.running:
            self.clock.tick(FPS)
            events = pygame.event.get()

            for event in events:
                if event.type == pygame.QUIT:
                    self.running = False
                    break

            if not self.running:
                break

            if self.game.phase == "setup":
                self._handle_setup(events)
            else:
                self._handle_playing(events)

            pygame.display.flip()

        pygame.quit()

    # ── Setup ─────────────────────────────────────────────────

    def _handle_setup(self, events):
        self.renderer.draw_setup(
            self.difficulty_buttons, self.health_buttons, self.start_button,
            self.difficulty, self.health_mode, self.ready,
        )

        for event in events:
            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                self.running = False
            if event.type != pygame.MOUSEBUTTONDOWN or event.button != 1:
                continue
            for value, _label, rect in self.difficulty_buttons:
                if rect.collidepoint(event.pos):
                    self.difficulty = value
            for value, _label, rect in self.health_buttons:
                if rect.collidepoint(event.pos):
                    self.health_mode = value
            if self.ready and self.start_button.collidepoint(event.pos):
                self.game.configure_session(self.difficulty, self.health_mode)
                self.game.start_session()
                print(f"[Crown Defense] Started: {self.difficulty}, "
                      f"{'100 HP' if self.health_mode else '1 Hit KO'}")

    # ── Playing ───────────────────────────────────────────────

    def _handle_playing(self, events):
        self.game.update()
        state = self.game.get_state()

        self.renderer.draw_field(state)
        mx, my = pygame.mouse.get_pos()
        if state["selection"] and my < FIELD_HEIGHT:
            valid = validate_placement(mx, my, self.game.towers, self.map) is None
            self.renderer.draw_range_preview(mx, my, state["selection"], valid)
        self.renderer.draw_hud(state, self.tower_buttons, self.wave_button, self.info_text)
        self.renderer.draw_notifications(state["notifications"])

        if self.game.phase == "game_over":
            self.renderer.draw_game_over(state["wave_number"])
            for event in events:
                if event.type == pygame.KEYDOWN and event.key == pygame.K_SPACE:
                    print(f"[Crown Defense] Game over at wave {state['wave_number']}")
                    self._new_session()
            return

        for event in events:
            if event.type == pygame.KEYDOWN:
                self._handle_key(event)
            elif event.type == pygame.MOUSEBUTTONDOWN:
                self._handle_click(event)

    def _handle_key(self, event):
        if event.key == pygame.K_ESCAPE:
            self.game.select_tower_type(None)
            self.info_text = ""
        elif event.key == pygame.K_SPACE:
            self.game.request_next_wave()
        elif event.key in TOWER_KEYS and TOWER_KEYS[event.key] < len(TOWER_ORDER):
            self._select(TOWER_ORDER[TOWER_KEYS[event.key]])

    def _select(self, tower_type):
        self.game.select_tower_type(tower_type)
        self.info_text = f"Click map to place {TOWERS[tower_type]['name']}"

    def _handle_click(self, event):
        mx, my = event.pos

        if event.button == 3:
            self.game.select_tower_type(None)
            self.info_text = ""
            return
        if event.button != 1:
            return

        for ttype, rect in self.tower_buttons:
            if rect.collidepoint(mx, my):
                self._select(ttype)
                return

        if self.wave_button.collidepoint(mx, my):
            self.game.request_next_wave()
            return

        if my < FIELD_HEIGHT:
            ok, result = self.game.click(mx, my)
            if ok:
                self.info_text = ""
            elif self.game.selection is not None or self.game.get_tower_at(mx, my):
                self.info_text = describe(result)


def main():
    map_path = sys.argv[1] if len(sys.argv) > 1 else None
    client = CrownDefenseClient(map_path)
    try:
        client.run()
    except KeyboardInterrupt:
        print("\n[Crown Defense] Shutting down...")
        pygame.quit()


if __name__ == "__main__":
    main()
