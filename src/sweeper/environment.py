"""
Gymnasium environment wrapper for Minesweeper.

Lets scripted or learning players drive the same command session a
human uses at the keyboard.
"""
import random
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import Board, BoardConfig, GameStatus
from .controls import Command, Session
from .render import render


# Every command except QUIT, in action-index order
ACTIONS: Tuple[Command, ...] = (
    Command.UP,
    Command.DOWN,
    Command.LEFT,
    Command.RIGHT,
    Command.OPEN,
    Command.FLAG,
)


# ============================================================================
# Minesweeper Environment
# ============================================================================

class SweeperEnv(gym.Env):
    """
    Gymnasium environment for cursor-driven Minesweeper.

    Observation:
        Dict with
        - "board": 2D array (-1 hidden, -2 flagged, 0-8 opened, 9 mine)
        - "cursor": (x, y) cursor position

    Actions:
        Discrete index into ACTIONS (four moves, open, flag).

    Rewards:
        - +1 per newly opened cell
        - +10 for winning the game
        - -10 for hitting a mine
        - -0.1 for a command that changed nothing
        - 0 for any command after the game has ended
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            config: Board configuration (default: 30x23 with 99 mines).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or BoardConfig()
        self.render_mode = render_mode
        self.session = Session(Board(self.config))

        self.observation_space = spaces.Dict(
            {
                "board": spaces.Box(
                    low=-2,
                    high=9,
                    shape=(self.config.height, self.config.width),
                    dtype=np.int8,
                ),
                "cursor": spaces.MultiDiscrete(
                    [self.config.width, self.config.height]
                ),
            }
        )
        self.action_space = spaces.Discrete(len(ACTIONS))

        self._steps = 0

    @property
    def board(self) -> Board:
        return self.session.board

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[Dict[str, np.ndarray], Dict[str, Any]]:
        """
        Start a new game.

        Args:
            seed: Random seed for reproducible mine layouts.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        rng = random.Random(int(self.np_random.integers(2**31)))
        self.session = Session(Board(self.config, rng=rng))
        self._steps = 0

        return self._get_obs(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[Dict[str, np.ndarray], SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one command.

        Args:
            action: Index into ACTIONS.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        self._steps += 1
        before = self._get_obs()
        opened_before = self.board.opened_count
        status_before = self.board.status

        self.session.handle(ACTIONS[action])

        observation = self._get_obs()
        reward = self._calculate_reward(
            before, observation, opened_before, status_before
        )
        terminated = not self.board.is_playing

        if self.render_mode == "human":
            self.render()

        return observation, reward, terminated, False, self._get_info()

    def _calculate_reward(
        self,
        before: Dict[str, np.ndarray],
        after: Dict[str, np.ndarray],
        opened_before: int,
        status_before: GameStatus,
    ) -> float:
        """Score the change one command made; finished games score 0."""
        if status_before != GameStatus.IN_PROGRESS:
            return 0.0
        if self.board.is_lost:
            return -10.0
        if self.board.is_won:
            return 10.0

        newly_opened = self.board.opened_count - opened_before
        if newly_opened:
            return float(newly_opened)

        unchanged = np.array_equal(
            before["board"], after["board"]
        ) and np.array_equal(before["cursor"], after["cursor"])
        return -0.1 if unchanged else 0.0

    def _get_obs(self) -> Dict[str, np.ndarray]:
        return {
            "board": self.board.get_observation(),
            "cursor": np.array(self.board.cursor, dtype=np.int64),
        }

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        return {
            "steps": self._steps,
            "opened": self.board.opened_count,
            "remaining_flags": self.board.remaining_flags(),
            "status": self.board.status.name,
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return render(self.board)
        if self.render_mode == "human":
            print(render(self.board))
        return None
