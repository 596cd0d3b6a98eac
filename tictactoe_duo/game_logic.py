import logging
import operator
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)

BOARD_CELLS = 9

# fixed scan order: rows, columns, diagonals
LINES = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)


class Mark(Enum):
    """
    player symbol in a cell
    """
    X = "X"
    O = "O"

    def opposite(self):
        return Mark.O if self is Mark.X else Mark.X


class GameStatus(Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAW = "draw"


@dataclass(frozen=True)
class Outcome:
    """
    derived game result; winner and line only set when won
    """
    status: GameStatus
    winner: Mark = None
    line: tuple = None

    @classmethod
    def in_progress(cls):
        return cls(GameStatus.IN_PROGRESS)

    @classmethod
    def draw(cls):
        return cls(GameStatus.DRAW)

    @classmethod
    def won(cls, mark, line):
        return cls(GameStatus.WON, mark, tuple(line))

    @property
    def is_over(self):
        return self.status is not GameStatus.IN_PROGRESS


def evaluate_outcome(board):
    """
    scan LINES in order, first uniform non-empty line wins;
    full board without a line is a draw. pure, never mutates board.
    """
    if len(board) != BOARD_CELLS:
        raise ValueError(f"board must have {BOARD_CELLS} cells, got {len(board)}")
    for line in LINES:
        a, b, c = line
        if board[a] is not None and board[a] == board[b] == board[c]:
            return Outcome.won(board[a], line)
    if all(cell is not None for cell in board):
        return Outcome.draw()
    return Outcome.in_progress()


class GameLogic:
    """
    tic-tac-toe rules and state for two local players
    """
    def __init__(self):
        """
        init empty board, X to move
        """
        self._board = [None] * BOARD_CELLS   # row-major, None = empty
        self._current = Mark.X               # who moves next
        self._history = []                   # pre-move snapshots
        self._outcome = Outcome.in_progress()

    # -- observable state --------------------------------------------------

    @property
    def board(self):
        return tuple(self._board)

    @property
    def current_mark(self):
        return self._current

    @property
    def outcome(self):
        return self._outcome

    @property
    def winner(self):
        return self._outcome.winner

    @property
    def winning_line(self):
        return self._outcome.line

    @property
    def is_game_over(self):
        return self._outcome.is_over

    @property
    def history(self):
        return tuple(self._history)

    @property
    def move_count(self):
        return len(self._history)

    @property
    def can_start_new_game(self):
        # at least one move since the last reset
        return bool(self._history)

    @property
    def can_reset(self):
        return self.is_game_over or any(cell is not None for cell in self._board)

    def is_cell_empty(self, index):
        """
        true if index valid and cell blank
        """
        cell = self._cell_index(index)
        return cell is not None and self._board[cell] is None

    # -- transitions -------------------------------------------------------

    def apply_move(self, index):
        """
        place current mark at index, flip turn, recompute outcome.
        invalid moves are ignored; returns True only if the move was applied
        """
        if self._outcome.is_over:
            logger.debug("move %r ignored: game already over", index)
            return False
        cell = self._cell_index(index)
        if cell is None or self._board[cell] is not None:
            logger.debug("move %r ignored: cell occupied or out of range", index)
            return False

        mark = self._current
        self._history.append(tuple(self._board))
        self._board[cell] = mark
        self._current = mark.opposite()
        self._outcome = evaluate_outcome(self._board)
        logger.debug("%s played cell %d", mark.value, cell)

        if self._outcome.status is GameStatus.WON:
            logger.info("%s wins on line %s", self._outcome.winner.value, self._outcome.line)
        elif self._outcome.status is GameStatus.DRAW:
            logger.info("game drawn after %d moves", self.move_count)
        return True

    def reset(self):
        """
        clear board, turn, outcome and history
        """
        self._board = [None] * BOARD_CELLS
        self._current = Mark.X
        self._history = []
        self._outcome = evaluate_outcome(self._board)
        logger.info("board reset")

    def new_game(self):
        """
        same as reset but only once a move has been made
        """
        if not self.can_start_new_game:
            return False
        self.reset()
        return True

    @staticmethod
    def _cell_index(index):
        """
        plain int for any integer-like index in range, else None
        """
        # bool is an int subclass, reject it explicitly
        if isinstance(index, bool):
            return None
        try:
            cell = operator.index(index)
        except TypeError:
            return None
        return cell if 0 <= cell < BOARD_CELLS else None


def status_text(game):
    """
    one-line status for the window
    """
    outcome = game.outcome
    if outcome.status is GameStatus.WON:
        return f"{outcome.winner.value} wins!"
    if outcome.status is GameStatus.DRAW:
        return "It's a draw!"
    return f"Next: {game.current_mark.value}"
