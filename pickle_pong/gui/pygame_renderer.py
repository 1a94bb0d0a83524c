"""
PyGame renderer for Pickle Pong
"""

import pygame

from pickle_pong.core.entities import MatchSnapshot
from pickle_pong.core.entities import Side
from pickle_pong.utils.config import GameConfig
from pickle_pong.utils.config import game_config


def start_button_label(winner: Side | None) -> str:
    """Text of the start control, which doubles as the replay control"""
    if winner is None:
        return "Start Game"
    return f"{winner.value} Wins! Play Again"


class PygameRenderer:
    """PyGame-based renderer for Pickle Pong"""

    def __init__(self, config: GameConfig | None = None):
        """Initialize the PyGame renderer"""
        self.config = config or game_config
        self.court_width = self.config.COURT_WIDTH
        self.court_height = self.config.COURT_HEIGHT
        self.court_top = self.config.SCOREBOARD_HEIGHT
        self.width = self.court_width
        self.height = self.court_top + self.court_height

        # Initialize PyGame
        pygame.init()

        # Create the display
        self.screen = pygame.display.set_mode((self.width, self.height))
        pygame.display.set_caption("Pickle Pong")

        # Clock for controlling frame rate
        self.clock = pygame.time.Clock()

        # Colors
        self.background_color = self.config.BACKGROUND_COLOR
        self.line_color = self.config.COURT_LINE_COLOR
        self.ball_color = self.config.BALL_COLOR
        self.paddle_colors = {
            Side.DOG: self.config.DOG_PADDLE_COLOR,
            Side.CAT: self.config.CAT_PADDLE_COLOR,
        }
        self.button_color = self.config.BUTTON_COLOR
        self.text_color = self.config.TEXT_COLOR
        self.button_text_color: tuple[int, int, int] = (255, 255, 255)

        # Font for text rendering
        self.font_score = pygame.font.Font(None, 40)
        self.font_button = pygame.font.Font(None, 32)

        # Last drawn start control, None while a match is running
        self.start_button_rect: pygame.Rect | None = None

    def clear_screen(self) -> None:
        """Clear the screen with background color"""
        self.screen.fill(self.background_color)

    def draw_court(self) -> None:
        """Draw the court border"""
        rect = pygame.Rect(0, self.court_top, self.court_width, self.court_height)
        pygame.draw.rect(self.screen, self.line_color, rect, 2)

    def draw_scoreboard(self, snapshot: MatchSnapshot) -> None:
        """Draw both scores, dog on the left, cat on the right"""
        for text, center_x in (
            (f"Dog: {snapshot.dog_score}", self.width // 4),
            (f"Cat: {snapshot.cat_score}", 3 * self.width // 4),
        ):
            text_surface = self.font_score.render(text, True, self.text_color)
            text_rect = text_surface.get_rect()
            text_rect.center = (center_x, self.court_top // 2)
            self.screen.blit(text_surface, text_rect)

    def paddle_rect(self, side: Side, paddle_y: float) -> pygame.Rect:
        """Screen rectangle of a paddle centered on paddle_y"""
        width = int(self.config.PADDLE_WIDTH)
        height = int(self.config.PADDLE_HEIGHT)
        left = 0 if side is Side.DOG else self.court_width - width
        top = int(self.court_top + paddle_y - self.config.PADDLE_HEIGHT / 2)
        return pygame.Rect(left, top, width, height)

    def draw_paddle(self, side: Side, paddle_y: float) -> None:
        """Draw a player paddle"""
        radius = int(self.config.PADDLE_WIDTH // 2)
        pygame.draw.rect(
            self.screen, self.paddle_colors[side], self.paddle_rect(side, paddle_y), 0, radius
        )

    def draw_ball(self, position: tuple[float, float]) -> None:
        """Draw the ball, its top-left corner at the ball position"""
        size = int(self.config.BALL_SIZE)
        rect = pygame.Rect(int(position[0]), int(self.court_top + position[1]), size, size)
        pygame.draw.ellipse(self.screen, self.ball_color, rect)

    def draw_start_button(self, winner: Side | None) -> pygame.Rect:
        """Draw the start/replay control near the bottom of the screen"""
        text_surface = self.font_button.render(
            start_button_label(winner), True, self.button_text_color
        )
        button_rect = text_surface.get_rect().inflate(30, 30)
        button_rect.centerx = self.width // 2
        button_rect.bottom = self.height - 50
        pygame.draw.rect(self.screen, self.button_color, button_rect, 0, 10)
        self.screen.blit(text_surface, text_surface.get_rect(center=button_rect.center))
        return button_rect

    def render_snapshot(self, snapshot: MatchSnapshot) -> None:
        """Render the complete match state"""
        self.clear_screen()
        self.draw_scoreboard(snapshot)
        self.draw_court()

        self.draw_paddle(Side.DOG, snapshot.dog_paddle_y)
        self.draw_paddle(Side.CAT, snapshot.cat_paddle_y)
        self.draw_ball(snapshot.ball_position)

        if snapshot.running:
            self.start_button_rect = None
        else:
            self.start_button_rect = self.draw_start_button(snapshot.winner)

    def is_start_button_hit(self, screen_pos: tuple[int, int]) -> bool:
        """Checks if a click landed on the start control"""
        return self.start_button_rect is not None and bool(
            self.start_button_rect.collidepoint(screen_pos)
        )

    def present(self) -> None:
        """Present the rendered frame"""
        pygame.display.flip()

    def update(self, fps: int | None = None) -> None:
        """Maintain frame rate"""
        fps = fps or self.config.FPS
        self.clock.tick(fps)

    def cleanup(self) -> None:
        """Clean up PyGame resources"""
        pygame.quit()
