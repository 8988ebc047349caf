"""
NEON PONG: one player against the computer, built on pygame-ce.

- left paddle: mouse, or Up/Down (W/S)
- SPACE start / resume, P pause, R reset
- D cycles AI difficulty, Q particle quality, M toggles sound
- F3 debug overlay, Esc quits

Settings are saved to the per-user config path via pickle.
"""
import sys

import pygame as pg

from neonpong import config
from neonpong.audio import ToneSink
from neonpong.config import FONT_SIZE, FPS, HEIGHT, WIDTH
from neonpong.game import DOWN, UP, Game
from neonpong.render import draw_debug, draw_frame

MOVE_KEYS = {
    pg.K_UP: UP,
    pg.K_w: UP,
    pg.K_DOWN: DOWN,
    pg.K_s: DOWN,
}


class App:
    def __init__(self, settings=None):
        self.settings = settings if settings is not None else config.load_settings()
        self.game = Game(settings=self.settings)
        self.audio = ToneSink(self.settings)
        self.debug = False
        self.screen = None
        self.clock = None
        self.font = None
        self.small_font = None

    def help_text(self):
        s = self.settings
        sound = "on" if s.get("sound", True) else "off"
        return (
            f"SPACE start  P pause  R reset  |  D: AI {s['ai_difficulty']}"
            f"  Q: particles {s['particle_quality']}  M: sound {sound}  |  F3 debug"
        )

    def change_setting(self, key):
        s = self.settings
        if key == pg.K_d:
            s["ai_difficulty"] = config.cycle(config.AI_DIFFICULTIES, s["ai_difficulty"])
        elif key == pg.K_q:
            s["particle_quality"] = config.cycle(config.PARTICLE_QUALITIES, s["particle_quality"])
        elif key == pg.K_m:
            s["sound"] = not s.get("sound", True)
        else:
            return False
        if config.save_settings(s):
            print(f"settings saved: {s}")
        return True

    def handle_event(self, event):
        """Feed one pygame event to the game. Returns False to quit."""
        game = self.game
        if event.type == pg.QUIT:
            return False
        if event.type == pg.MOUSEMOTION:
            game.input.point(event.pos[1])
        elif event.type == pg.KEYDOWN:
            if event.key == pg.K_ESCAPE:
                return False
            if event.key in MOVE_KEYS:
                game.input.press(MOVE_KEYS[event.key])
            elif event.key == pg.K_SPACE:
                game.start()
            elif event.key == pg.K_p:
                game.toggle_pause()
            elif event.key == pg.K_r:
                game.reset()
            elif event.key == pg.K_F3:
                self.debug = not self.debug
            else:
                self.change_setting(event.key)
        elif event.type == pg.KEYUP:
            if event.key in MOVE_KEYS:
                game.input.release(MOVE_KEYS[event.key])
        return True

    def debug_lines(self, frame):
        ball = frame.ball
        return [
            f"FPS: {self.clock.get_fps():.1f}",
            f"State: {frame.run_state}",
            f"Particles: {len(frame.particles)}",
            f"TrailLen: {len(ball.trail)}",
            f"Ball: dx={ball.dx:.2f} dy={ball.dy:.2f}",
        ]

    def run(self):
        pg.init()
        pg.display.set_caption("NEON PONG")
        self.screen = pg.display.set_mode((WIDTH, HEIGHT))
        self.clock = pg.time.Clock()
        self.font = pg.font.SysFont(None, FONT_SIZE)
        self.small_font = pg.font.SysFont(None, 24)
        self.audio.init()

        running = True
        while running:
            self.clock.tick(FPS)
            for event in pg.event.get():
                if not self.handle_event(event):
                    running = False
                    break

            frame = self.game.tick()
            self.audio.play_all(frame.tones)

            draw_frame(self.screen, frame, self.font, self.small_font, self.help_text())
            if self.debug:
                draw_debug(self.screen, self.small_font, self.debug_lines(frame))
            pg.display.flip()

        config.save_settings(self.settings)
        print("quitting...")
        self.audio.quit()
        pg.quit()


# --- Entry point ---
def main():
    App().run()
    sys.exit()


if __name__ == "__main__":
    main()
