"""
Human paddle controllers for Pickle Pong: keyboard and pointer/touch
"""

import pygame

from pickle_pong.core.entities import Side
from pickle_pong.utils.config import game_config


class HumanPlayer:
    """Human player that moves its paddle with two keys"""

    def __init__(self, side: Side, name: str | None = None, step: float | None = None):
        """
        Initialize keyboard player

        Args:
            side: Paddle controlled by this player
            name: Player name
            step: Paddle movement per frame while a key is held
        """
        self.side = side
        self.name = name or side.value.title()
        self.step = step if step is not None else game_config.PADDLE_KEY_STEP
        self.direction = 0.0

        # Dog uses the letter keys, Cat the arrows
        layout = game_config.get_keyboard_layout()
        if side is Side.DOG:
            self.key_mapping = layout.dog_keys.copy()
            self.display_names = layout.display_names.copy()
        else:
            self.key_mapping = layout.cat_keys.copy()
            self.display_names = {"up": "↑", "down": "↓"}

    def update_from_keys(self, keys_pressed: dict[int, bool]) -> None:
        """Update direction based on currently pressed keys"""
        direction = 0.0
        if keys_pressed.get(self.key_mapping["up"], False):
            direction -= 1.0
        if keys_pressed.get(self.key_mapping["down"], False):
            direction += 1.0
        self.direction = direction

    def get_paddle_position(self, current_y: float) -> float | None:
        if self.direction == 0.0:
            return None
        return current_y + self.direction * self.step

    def get_control_info(self) -> dict[str, str]:
        """Get information about controls for this player"""
        return self.display_names.copy()


class PointerPlayer:
    """Player that drags its paddle with the mouse or a finger"""

    def __init__(self, side: Side, name: str | None = None):
        self.side = side
        self.name = name or f"{side.value.title()} (pointer)"
        self.target_y: float | None = None

    def point_at(self, y: float) -> None:
        """Remember where the pointer is, applied on the next frame"""
        self.target_y = y

    def get_paddle_position(self, current_y: float) -> float | None:
        target, self.target_y = self.target_y, None
        return target


class InputManager:
    """Translates pygame events into paddle controller updates"""

    def __init__(self, court_width: float, court_top: float = 0.0) -> None:
        """
        Args:
            court_width: Width of the court, its left half belongs to the dog
            court_top: Screen y of the top of the court (below the scoreboard)
        """
        self.court_width = court_width
        self.court_top = court_top
        self.keyboard_players: dict[Side, HumanPlayer] = {}
        self.pointer_players: dict[Side, PointerPlayer] = {}
        self.keys_pressed: dict[int, bool] = {}

    def add_player(self, player: HumanPlayer | PointerPlayer) -> None:
        """Add a controller to manage"""
        if isinstance(player, HumanPlayer):
            self.keyboard_players[player.side] = player
        else:
            self.pointer_players[player.side] = player

    def get_players(self) -> list[HumanPlayer | PointerPlayer]:
        """Get all managed controllers"""
        return [*self.keyboard_players.values(), *self.pointer_players.values()]

    def side_at(self, screen_x: float) -> Side:
        """Which paddle a pointer at this screen x controls"""
        return Side.DOG if screen_x < self.court_width / 2 else Side.CAT

    def update_players(self) -> None:
        """Update keyboard players with current key states"""
        for player in self.keyboard_players.values():
            player.update_from_keys(self.keys_pressed)

    def _point(self, screen_x: float, screen_y: float) -> None:
        player = self.pointer_players.get(self.side_at(screen_x))
        if player is not None:
            player.point_at(screen_y - self.court_top)

    def handle_event(self, event: pygame.event.Event) -> str | None:
        """
        Handle pygame events

        Returns:
            String indicating special actions ("start", "quit") or None
        """
        if event.type == pygame.KEYDOWN:
            self.keys_pressed[event.key] = True
            if event.key in (pygame.K_SPACE, pygame.K_RETURN):
                return "start"
            if event.key == pygame.K_ESCAPE:
                return "quit"

        elif event.type == pygame.KEYUP:
            self.keys_pressed[event.key] = False

        elif event.type == pygame.MOUSEBUTTONDOWN:
            self._point(*event.pos)

        elif event.type == pygame.MOUSEMOTION and event.buttons[0]:
            self._point(*event.pos)

        elif event.type in (pygame.FINGERDOWN, pygame.FINGERMOTION):
            # Finger coordinates are normalized to the window size
            width, height = pygame.display.get_window_size()
            self._point(event.x * width, event.y * height)

        elif event.type == pygame.QUIT:
            return "quit"

        return None


def create_human_players() -> list[HumanPlayer | PointerPlayer]:
    """Keyboard and pointer controllers for both sides"""
    return [
        HumanPlayer(Side.DOG, "Dog"),
        HumanPlayer(Side.CAT, "Cat"),
        PointerPlayer(Side.DOG),
        PointerPlayer(Side.CAT),
    ]
