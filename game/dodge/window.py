"""
Arcade host for a GameSession: drives frames from on_update, polls keys, draws
"""

from __future__ import annotations

import arcade

from .entities import Rect
from .session import GameSession


class DodgeWindow(arcade.Window):
    """Arcade window that renders (and optionally drives) a GameSession"""

    def __init__(self, session: GameSession, drive: bool = True, title: str = "Asteroid Dodge"):
        super().__init__(session.config.width, session.config.height, title)
        self.session = session
        self.drive = drive

        # Colors
        self.BG = (18, 18, 22)
        self.PLAYER_C = (80, 200, 255)
        self.ASTEROID_C = (170, 160, 150)
        self.HUD_C = (255, 255, 255)
        self.BOX_C = (0, 255, 0)
        self.FULL_BOX_C = (255, 0, 0)
        self.HIT_BOX_C = (255, 255, 0)
        self.BUTTON_C = (74, 74, 74)

        self.background_color = self.BG

    # ----------------------------
    # Host loop
    # ----------------------------

    def on_update(self, delta_time: float):
        if not self.drive:
            return
        delta_ms = delta_time * 1000.0
        self.session.advance_frame(delta_ms)

    def on_key_press(self, key, modifiers):
        self._set_key(key, True)
        if key == arcade.key.SPACE and self.session.is_over:
            self.session.restart()

    def on_key_release(self, key, modifiers):
        self._set_key(key, False)

    def on_mouse_press(self, x, y, button, modifiers):
        if not self.session.is_over:
            return
        left, right, bottom, top = self._button_lrbt()
        if left <= x <= right and bottom <= y <= top:
            self.session.restart()

    def _set_key(self, key, held: bool):
        state = self.session.input
        if key == arcade.key.UP:
            state.up = held
        elif key == arcade.key.DOWN:
            state.down = held
        elif key == arcade.key.LEFT:
            state.left = held
        elif key == arcade.key.RIGHT:
            state.right = held

    # ----------------------------
    # Drawing
    # ----------------------------

    def on_draw(self):
        self.clear()
        s = self.session

        for a in s.asteroids:
            arcade.draw_circle_filled(a.x, self._flip(a.y), a.bounds.width / 2, self.ASTEROID_C)

        p = s.player
        pb = p.bounds
        arcade.draw_triangle_filled(
            p.x, self._flip(pb.y),
            pb.x, self._flip(pb.bottom),
            pb.right, self._flip(pb.bottom),
            self.PLAYER_C,
        )

        if s.debug:
            self._stroke(pb, self.BOX_C)
            for a in s.asteroids:
                self._stroke(a.bounds, self.FULL_BOX_C)
                self._stroke(s.spawner.hitbox(a), self.HIT_BOX_C)

        arcade.draw_text(f"Score: {int(s.score)}", 16, self.height - 48, self.HUD_C, 24)
        arcade.draw_text(f"Level: {s.level}", 16, self.height - 88, self.HUD_C, 24)

        cx, cy = self.width / 2, self.height / 2
        if s.banner is not None and not s.is_over:
            arcade.draw_text(s.banner.text, cx, cy, self.HUD_C, 48,
                             anchor_x="center", anchor_y="center")

        if s.is_over and s.summary is not None:
            arcade.draw_text("Game Over!", cx, cy, self.HUD_C, 48,
                             anchor_x="center", anchor_y="center")
            arcade.draw_text(f"Final Score: {s.summary.final_score}", cx, cy - 50, self.HUD_C, 24,
                             anchor_x="center", anchor_y="center")
            arcade.draw_text(f"Level Reached: {s.summary.level}", cx, cy - 90, self.HUD_C, 24,
                             anchor_x="center", anchor_y="center")
            left, right, bottom, top = self._button_lrbt()
            arcade.draw_lrbt_rectangle_filled(left, right, bottom, top, self.BUTTON_C)
            arcade.draw_text("Play Again", cx, (bottom + top) / 2, self.HUD_C, 24,
                             anchor_x="center", anchor_y="center")

    def _button_lrbt(self):
        cx, cy = self.width / 2, self.height / 2 - 150
        return cx - 90, cx + 90, cy - 22, cy + 22

    def _stroke(self, box: Rect, color):
        arcade.draw_lrbt_rectangle_outline(
            box.x, box.right, self._flip(box.bottom), self._flip(box.y), color, 2
        )

    def _flip(self, y: float) -> float:
        # Simulation is y-down, Arcade is y-up
        return self.height - y
