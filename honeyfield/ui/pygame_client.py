"""Pygame 2D visualization for the Honeyfield simulation.

Renders hives, flowers, crops and bees in a window, with a side panel of
monitors and a bee-population sparkline.  The simulation steps at a
configurable tick rate while the display refreshes at the Pygame frame
rate.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

import numpy as np
import pygame

if TYPE_CHECKING:
    from honeyfield.simulation.engine import SimulationEngine

from honeyfield.flora.plants import HARVEST_GROWTH, MAX_NECTAR
from honeyfield.simulation.config import SimulationConfig

# Colour palette
_BG = (25, 35, 20)
_HIVE = (170, 110, 40)
_BEE = (250, 220, 40)
_BEE_FULL = (255, 140, 0)
_POLLINATED_RING = (255, 255, 255)
_TEXT = (200, 200, 200)
_PLOT = (250, 220, 40)

# Flower colour range (pale -> saturated magenta by nectar)
_FLOWER_LO = np.array([90, 60, 90], dtype=np.float64)
_FLOWER_HI = np.array([240, 60, 200], dtype=np.float64)

# Crop colour range (seedling -> ripe wheat by growth)
_CROP_LO = np.array([40, 90, 30], dtype=np.float64)
_CROP_HI = np.array([220, 200, 80], dtype=np.float64)


def _blend(lo: np.ndarray, hi: np.ndarray, t: float) -> list[int]:
    t = min(max(t, 0.0), 1.0)
    return (lo + t * (hi - lo)).astype(int).tolist()


class PygameRenderer:
    """Renders a SimulationEngine state into a Pygame window.

    Attributes:
        engine: The simulation engine to visualise.
        cell_size: Pixels per unit of field distance.
        screen: The Pygame display surface.
    """

    # Speed presets: ticks per second at 30 fps
    _SPEED_STEPS: ClassVar[list[float]] = [
        0.5,
        1.0,
        3.0,
        5.0,
        10.0,
        15.0,
        30.0,
        60.0,
    ]
    _PLOT_HEIGHT: ClassVar[int] = 80

    def __init__(
        self,
        engine: SimulationEngine,
        cell_size: int = 16,
        ticks_per_second: float = 5.0,
    ) -> None:
        """Initialise the renderer.

        Args:
            engine: The simulation engine to render.
            cell_size: Pixels per unit of field distance.
            ticks_per_second: Simulation ticks per real-time second.
        """
        self.engine = engine
        self.cell_size = cell_size
        self.ticks_per_second = ticks_per_second
        self._speed_index = self._nearest_speed(ticks_per_second)
        self._tick_accumulator = 0.0

        space = engine.state.space
        w = int(space.width * cell_size)
        h = int(space.height * cell_size)
        self._panel_width = 240
        self._win_w = w + self._panel_width
        self._win_h = max(h, 460)

        pygame.init()
        self.screen = pygame.display.set_mode((self._win_w, self._win_h))
        pygame.display.set_caption("Honeyfield")
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("monospace", 14)
        self.running = True
        self.paused = False

    def _nearest_speed(self, tps: float) -> int:
        """Return the index of the closest speed preset."""
        diffs = [abs(s - tps) for s in self._SPEED_STEPS]
        return diffs.index(min(diffs))

    def run(self, fps: int = 30) -> None:
        """Main loop: handle events, step sim, render.

        Args:
            fps: Target frames per second.
        """
        while self.running:
            dt = self.clock.tick(fps) / 1000.0  # seconds elapsed
            self._handle_events()
            if not self.paused:
                self._tick_accumulator += self.ticks_per_second * dt
                steps = int(self._tick_accumulator)
                self._tick_accumulator -= steps
                for _ in range(steps):
                    self.engine.step()
            self._draw()

        pygame.quit()

    def _handle_events(self) -> None:
        """Process Pygame input events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.running = False
                elif event.key == pygame.K_SPACE:
                    self.paused = not self.paused
                elif event.key == pygame.K_r:
                    self.engine.setup()
                elif event.key in (pygame.K_PLUS, pygame.K_EQUALS):
                    self._speed_index = min(
                        len(self._SPEED_STEPS) - 1,
                        self._speed_index + 1,
                    )
                    self.ticks_per_second = self._SPEED_STEPS[self._speed_index]
                elif event.key == pygame.K_MINUS:
                    self._speed_index = max(0, self._speed_index - 1)
                    self.ticks_per_second = self._SPEED_STEPS[self._speed_index]
                elif event.key in (pygame.K_UP, pygame.K_DOWN):
                    delta = 1 if event.key == pygame.K_UP else -1
                    self._nudge_starvation_threshold(delta)

    def _nudge_starvation_threshold(self, delta: int) -> None:
        lo, hi = SimulationConfig.RANGES["starvation_threshold"]
        days = self.engine.state.starvation_threshold + delta
        if lo <= days <= hi:
            self.engine.set_starvation_threshold(days)

    def _to_screen(self, x: float, y: float) -> tuple[int, int]:
        return int(x * self.cell_size), int(y * self.cell_size)

    def _draw(self) -> None:
        """Render one frame."""
        self.screen.fill(_BG)
        self._draw_crops()
        self._draw_flowers()
        self._draw_hives()
        self._draw_bees()
        self._draw_info_panel()
        pygame.display.flip()

    def _draw_flowers(self) -> None:
        """Draw flowers shaded by nectar, ringed once pollinated."""
        radius = max(3, self.cell_size // 3)
        for flower in self.engine.state.registry.flowers:
            centre = self._to_screen(flower.x, flower.y)
            colour = _blend(_FLOWER_LO, _FLOWER_HI, flower.nectar / MAX_NECTAR)
            pygame.draw.circle(self.screen, colour, centre, radius)
            if flower.pollinated:
                pygame.draw.circle(self.screen, _POLLINATED_RING, centre, radius, 1)

    def _draw_crops(self) -> None:
        """Draw crops as squares shaded by growth."""
        size = max(4, self.cell_size // 2)
        for crop in self.engine.state.registry.crops:
            cx, cy = self._to_screen(crop.x, crop.y)
            colour = _blend(_CROP_LO, _CROP_HI, crop.growth / HARVEST_GROWTH)
            pygame.draw.rect(
                self.screen,
                colour,
                (cx - size // 2, cy - size // 2, size, size),
            )

    def _draw_hives(self) -> None:
        size = max(8, self.cell_size)
        for hive in self.engine.state.registry.hives:
            cx, cy = self._to_screen(hive.x, hive.y)
            pygame.draw.rect(
                self.screen,
                _HIVE,
                (cx - size // 2, cy - size // 2, size, size),
            )

    def _draw_bees(self) -> None:
        """Draw each bee as a small dot, orange while full."""
        radius = max(2, self.cell_size // 5)
        for bee in self.engine.state.registry.bees:
            colour = _BEE_FULL if bee.full else _BEE
            pygame.draw.circle(self.screen, colour, self._to_screen(bee.x, bee.y), radius)

    def _draw_info_panel(self) -> None:
        """Draw the monitors and population plot on the right side."""
        panel_x = int(self.engine.state.space.width * self.cell_size) + 10
        y = 10
        obs = self.engine.observables

        lines = [
            f"Day: {obs.tick}",
            f"Speed: {self.ticks_per_second:.1f} t/s",
            f"{'PAUSED' if self.paused else 'RUNNING'}",
            "",
            "--- Monitors ---",
            f"Bees: {obs.bees}",
            f"Hive resources: {obs.hive_resources:.1f}",
            f"Pollinated: {obs.pollination_success}",
            f"Crop yield: {obs.crop_yield}",
            f"Temperature: {obs.temperature:.2f}",
            f"Mean nectar: {obs.mean_flower_nectar:.2f}",
            f"Starvation: {self.engine.state.starvation_threshold} d",
        ]
        if self.engine.extinct:
            lines.append("EXTINCT")

        lines += [
            "",
            "--- Controls ---",
            "SPACE: pause",
            "+/-: speed",
            "UP/DOWN: starvation",
            "R: reset",
            "ESC: quit",
        ]

        for line in lines:
            surf = self.font.render(line, True, _TEXT)
            self.screen.blit(surf, (panel_x, y))
            y += 18

        self._draw_population_plot(panel_x, y + 10)

    def _draw_population_plot(self, x0: int, y0: int) -> None:
        """Sparkline of the bee count over the run."""
        width = self._panel_width - 20
        height = self._PLOT_HEIGHT
        counts = np.array([h.bees for h in self.engine.history], dtype=np.float64)
        pygame.draw.rect(self.screen, _TEXT, (x0, y0, width, height), 1)
        if counts.size < 2:
            return

        counts = counts[-width:]
        peak = max(counts.max(), 1.0)
        xs = x0 + np.linspace(0, width - 1, counts.size)
        ys = y0 + height - 1 - counts / peak * (height - 2)
        points = list(zip(xs.astype(int).tolist(), ys.astype(int).tolist()))
        pygame.draw.lines(self.screen, _PLOT, False, points)
