"""
Main game application with PyGame GUI
"""

import logging

import pygame

from pickle_pong.core.game_engine import MatchRunner
from pickle_pong.core.interfaces.renderer import RendererProtocol
from pickle_pong.core.physics import MatchEngine
from pickle_pong.gui.human_player import InputManager
from pickle_pong.gui.human_player import create_human_players
from pickle_pong.gui.pygame_renderer import PygameRenderer
from pickle_pong.utils.config import GameConfig
from pickle_pong.utils.config import game_config

logger = logging.getLogger(__name__)


class PicklePongApp:
    """Main application class: the frame driver and input source of a match"""

    def __init__(self, config: GameConfig | None = None, seed: int | None = None) -> None:
        """Initialize the application"""
        self.config = config or game_config
        self.engine = MatchEngine(self.config, seed=seed)
        pygame_renderer = PygameRenderer(self.config)
        self.renderer: RendererProtocol = pygame_renderer
        self.input_manager = InputManager(self.config.COURT_WIDTH, pygame_renderer.court_top)

        players = create_human_players()
        for player in players:
            self.input_manager.add_player(player)
        self.runner = MatchRunner(self.engine, players)

        self.running = True
        logger.info("Pickle Pong initialized, press SPACE or click Start Game")

    def start_match(self) -> None:
        """Start a match, or replay once a side has won"""
        if not self.runner.is_running():
            self.runner.start_match()

    def handle_event(self, event: pygame.event.Event) -> None:
        """Route one pygame event"""
        if (
            event.type == pygame.MOUSEBUTTONDOWN
            and not self.runner.is_running()
            and self.renderer.is_start_button_hit(event.pos)
        ):
            self.start_match()
            return

        action = self.input_manager.handle_event(event)
        if action == "start":
            self.start_match()
        elif action == "quit":
            self.running = False

    def update(self) -> None:
        """Update game logic by one frame"""
        self.input_manager.update_players()
        self.runner.update()

    def render(self) -> None:
        """Render the current state"""
        self.renderer.render_snapshot(self.engine.snapshot())
        self.renderer.present()

    def run(self) -> None:
        """Main application loop, one tick per frame at config.FPS"""
        logger.info("Starting Pickle Pong at %d FPS", self.config.FPS)

        try:
            while self.running:
                for event in pygame.event.get():
                    self.handle_event(event)

                self.update()
                self.render()

                # Control frame rate
                self.renderer.update(self.config.FPS)
        finally:
            self.cleanup()

    def cleanup(self) -> None:
        """Clean up resources"""
        stats = self.runner.get_stats()
        logger.info(
            "Closing after %d matches (dog %d, cat %d)",
            stats["matches_played"],
            stats["dog_wins"],
            stats["cat_wins"],
        )
        self.renderer.cleanup()


def main(config: GameConfig | None = None, seed: int | None = None) -> None:
    """Main entry point"""
    app = PicklePongApp(config, seed=seed)
    try:
        app.run()
    except KeyboardInterrupt:
        logger.info("User interruption")
