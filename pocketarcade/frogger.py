"""Frogger: hop across a road and a river to the far bank."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .config import SCREEN_HEIGHT, SCREEN_WIDTH
from .display import Color

FROG_SIZE = 4
ROAD_LANES = 3
RIVER_LANES = 3
MAX_CARS = 8
MAX_LOGS = 6
LANE_HEIGHT = 8
SAFE_ZONE_HEIGHT = 6
CAR_WIDTH = 8
CAR_HEIGHT = 6
LOG_HEIGHT = 6

TICK_INTERVAL = 100
SPAWN_INTERVAL = 1500

START_Y = SCREEN_HEIGHT - SAFE_ZONE_HEIGHT
ROAD_START_Y = SCREEN_HEIGHT - SAFE_ZONE_HEIGHT - ROAD_LANES * LANE_HEIGHT
ROAD_END_Y = SCREEN_HEIGHT - SAFE_ZONE_HEIGHT
RIVER_START_Y = SAFE_ZONE_HEIGHT
RIVER_END_Y = SAFE_ZONE_HEIGHT + RIVER_LANES * LANE_HEIGHT

_log = logging.getLogger(__name__)


@dataclass
class Frog:
    x: int = SCREEN_WIDTH // 2 - FROG_SIZE // 2
    y: int = START_Y
    on_log: bool = False
    log_index: int = -1


@dataclass
class Car:
    x: int = 0
    y: int = 0
    speed: int = 0
    active: bool = False
    direction: bool = False  # True moves right, False moves left


@dataclass
class Log:
    x: int = 0
    y: int = 0
    width: int = 0
    speed: int = 0
    active: bool = False


class FroggerGame:
    name = "FROGGER"

    def __init__(self, display, buttons, clock, rng):
        self.display = display
        self.buttons = buttons
        self.clock = clock
        self.rng = rng
        self.init()

    def init(self):
        self._reset_frog()
        self.cars = [Car() for _ in range(MAX_CARS)]
        self.logs = [Log() for _ in range(MAX_LOGS)]
        self.score = 0
        self.lives = 3
        self.game_over = False
        now = self.clock()
        self.last_update = now
        self.last_spawn = now
        self.highest_y = START_Y

    def update(self):
        self.handle_input()
        now = self.clock()
        if now - self.last_update > TICK_INTERVAL:
            self._update_cars()
            self._update_logs()
            self._update_frog()
            if now - self.last_spawn > SPAWN_INTERVAL:
                self._spawn_car()
                self._spawn_log()
                self.last_spawn = now
            self.last_update = now

        if self._check_car_collision() or self._check_water_collision():
            self.lives -= 1
            if self.lives <= 0:
                self.game_over = True
            else:
                self._reset_frog()

        if self.frog.y <= SAFE_ZONE_HEIGHT:
            self.score += 100
            if self.frog.y < self.highest_y:
                self.score += 50
                self.highest_y = self.frog.y
            self._reset_frog()

    def draw(self):
        d = self.display
        d.clear()
        self._draw_road()
        self._draw_cars()
        self._draw_logs()
        self._draw_frog()
        d.set_text_size(1)
        d.set_text_color(Color.WHITE)
        d.set_cursor(0, 0)
        d.write(f"Score:{self.score}")
        d.set_cursor(SCREEN_WIDTH - 45, 0)
        d.write(f"Lives:{self.lives}")
        return d.render()

    def handle_input(self):
        b = self.buttons
        frog = self.frog
        if b.up_pressed and frog.y > 0:
            frog.y -= LANE_HEIGHT
            frog.on_log = False
        elif b.down_pressed and frog.y < SCREEN_HEIGHT - FROG_SIZE:
            frog.y += LANE_HEIGHT
            frog.on_log = False
        elif b.left_pressed and frog.x > 0:
            frog.x -= FROG_SIZE
        elif b.right_pressed and frog.x < SCREEN_WIDTH - FROG_SIZE:
            frog.x += FROG_SIZE

    def _reset_frog(self):
        self.frog = Frog()

    def _update_frog(self):
        frog = self.frog
        if frog.on_log and 0 <= frog.log_index < MAX_LOGS:
            log = self.logs[frog.log_index]
            if log.active:
                frog.x += log.speed
                if frog.x + FROG_SIZE < log.x or frog.x > log.x + log.width:
                    frog.on_log = False
                    frog.log_index = -1
        frog.x = max(0, min(SCREEN_WIDTH - FROG_SIZE, frog.x))
        _log.debug("Frog: %d,%d OnLog: %s LogIndex: %d",
                   frog.x, frog.y, frog.on_log, frog.log_index)

    def _update_cars(self):
        for car in self.cars:
            if not car.active:
                continue
            if car.direction:
                car.x += car.speed
                if car.x > SCREEN_WIDTH:
                    car.active = False
            else:
                car.x -= car.speed
                if car.x < -CAR_WIDTH:
                    car.active = False

    def _update_logs(self):
        for log in self.logs:
            if not log.active:
                continue
            log.x += log.speed
            if log.x > SCREEN_WIDTH or log.x < -log.width:
                log.active = False

    def _spawn_car(self):
        car = next((c for c in self.cars if not c.active), None)
        if car is None:
            return
        car.active = True
        car.y = ROAD_START_Y + self.rng.randrange(0, ROAD_LANES) * LANE_HEIGHT
        car.direction = bool(self.rng.randrange(0, 2))
        car.speed = self.rng.randrange(1, 3)
        car.x = -CAR_WIDTH if car.direction else SCREEN_WIDTH

    def _spawn_log(self):
        log = next((lg for lg in self.logs if not lg.active), None)
        if log is None:
            return
        log.active = True
        log.y = RIVER_START_Y + self.rng.randrange(0, RIVER_LANES) * LANE_HEIGHT
        log.width = self.rng.randrange(20, 40)
        log.speed = self.rng.randrange(1, 2)
        log.x = -log.width

    def _check_car_collision(self):
        frog = self.frog
        if not (ROAD_START_Y <= frog.y < ROAD_END_Y):
            return False
        return any(
            car.active
            and frog.x + FROG_SIZE > car.x
            and frog.x < car.x + CAR_WIDTH
            and frog.y + FROG_SIZE > car.y
            and frog.y < car.y + CAR_HEIGHT
            for car in self.cars
        )

    def _check_water_collision(self):
        """Return True if the frog is in the river and not on a log."""
        frog = self.frog
        if not (RIVER_START_Y <= frog.y < RIVER_END_Y):
            return False
        frog.on_log = False
        frog.log_index = -1
        for index, log in enumerate(self.logs):
            if (log.active
                    and frog.x + FROG_SIZE > log.x
                    and frog.x < log.x + log.width
                    and frog.y + FROG_SIZE > log.y
                    and frog.y < log.y + LOG_HEIGHT):
                frog.on_log = True
                frog.log_index = index
                return False
        return True

    def _draw_frog(self):
        d = self.display
        frog = self.frog
        d.fill_rect(frog.x, frog.y, FROG_SIZE, FROG_SIZE, Color.WHITE)
        d.draw_pixel(frog.x + 1, frog.y + 1, Color.BLACK)
        d.draw_pixel(frog.x + 3, frog.y + 1, Color.BLACK)

    def _draw_cars(self):
        d = self.display
        for car in self.cars:
            if car.active:
                d.fill_rect(car.x, car.y, CAR_WIDTH, CAR_HEIGHT, Color.WHITE)
                d.draw_pixel(car.x + 2, car.y + 2, Color.BLACK)
                d.draw_pixel(car.x + 6, car.y + 2, Color.BLACK)

    def _draw_logs(self):
        d = self.display
        for log in self.logs:
            if not log.active:
                continue
            d.fill_rect(log.x, log.y, log.width, LOG_HEIGHT, Color.WHITE)
            for x in range(log.x, log.x + log.width, 4):
                d.draw_pixel(x, log.y + 1, Color.BLACK)
                d.draw_pixel(x + 2, log.y + 4, Color.BLACK)

    def _draw_road(self):
        d = self.display
        d.draw_line(0, SAFE_ZONE_HEIGHT, SCREEN_WIDTH, SAFE_ZONE_HEIGHT, Color.WHITE)
        d.draw_line(0, ROAD_END_Y, SCREEN_WIDTH, ROAD_END_Y, Color.WHITE)
        d.draw_line(0, RIVER_END_Y, SCREEN_WIDTH, RIVER_END_Y, Color.WHITE)
        for lane in range(1, ROAD_LANES):
            y = ROAD_START_Y + lane * LANE_HEIGHT
            for x in range(0, SCREEN_WIDTH, 8):
                d.draw_pixel(x, y, Color.WHITE)
        for lane in range(1, RIVER_LANES):
            y = RIVER_START_Y + lane * LANE_HEIGHT
            for x in range(0, SCREEN_WIDTH, 12):
                d.draw_pixel(x, y, Color.WHITE)
                d.draw_pixel(x + 2, y, Color.WHITE)