import logging
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)

BOARD_SIZE = 3                      # fixed 3x3 grid
CELL_COUNT = BOARD_SIZE * BOARD_SIZE
EMPTY = ''
SYMBOLS = ('X', 'O')                # X always starts a round

# rows top-to-bottom, cols left-to-right, then both diagonals
WIN_PATTERNS = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)


class InvalidCellError(ValueError):
    """
    cell index outside 0..8 (caller bug, not a game outcome)
    """


class RoundStatus(Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAWN = "drawn"


@dataclass(frozen=True)
class ContinueResult:
    next_player: str


@dataclass(frozen=True)
class WinResult:
    symbol: str
    triple: tuple


@dataclass(frozen=True)
class DrawResult:
    pass


@dataclass(frozen=True)
class NoOp:
    """
    move rejected: cell taken or round already over
    """


@dataclass(frozen=True)
class ResetEvent:
    pass


def other_symbol(symbol):
    # X <-> O
    return SYMBOLS[1] if symbol == SYMBOLS[0] else SYMBOLS[0]


class GameEngine:
    """
    tic-tac-toe rules, turn order and running score

    board is a flat row-major list (index = row*3 + col). apply_move and
    restart return/broadcast plain result values; nothing in here knows
    how the board gets drawn.
    """
    def __init__(self):
        """
        init board, turn and score tally
        """
        self._scores = {s: 0 for s in SYMBOLS}   # survives restart()
        self._listeners = []
        self._new_round()

    def _new_round(self):
        # board, turn and status always reset together
        self._board = [EMPTY] * CELL_COUNT
        self._current_player = SYMBOLS[0]
        self._active = True
        self._status = RoundStatus.IN_PROGRESS
        self._winner = None
        self._winning_triple = None

    # -------------------------------------------------------------------------
    # state accessors
    # -------------------------------------------------------------------------

    @property
    def current_player(self):
        return self._current_player

    @property
    def active(self):
        return self._active

    @property
    def status(self):
        return self._status

    @property
    def winner(self):
        return self._winner

    @property
    def winning_triple(self):
        return self._winning_triple

    @property
    def move_count(self):
        return sum(1 for cell in self._board if cell != EMPTY)

    def get_scores(self):
        return dict(self._scores)

    def get_board_snapshot(self):
        return tuple(self._board)

    def is_cell_empty(self, index):
        """
        true if index valid and cell blank
        """
        if isinstance(index, int) and 0 <= index < CELL_COUNT:
            return self._board[index] == EMPTY
        return False

    # -------------------------------------------------------------------------
    # listeners
    # -------------------------------------------------------------------------

    def subscribe(self, listener):
        """
        register a callable that receives every accepted-move result
        plus a ResetEvent on restart (NoOp is never broadcast)
        """
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener):
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self, event):
        for listener in list(self._listeners):
            listener(event)

    # -------------------------------------------------------------------------
    # moves
    # -------------------------------------------------------------------------

    def apply_move(self, index):
        """
        place current player's mark at index, check result

        returns ContinueResult, WinResult, DrawResult, or NoOp.
        raises InvalidCellError if index is not an int in 0..8.
        """
        # bool is an int subclass, still not a cell
        if not isinstance(index, int) or isinstance(index, bool) \
           or not 0 <= index < CELL_COUNT:
            raise InvalidCellError(f"cell index must be 0..{CELL_COUNT - 1}, got {index!r}")

        if not self._active or self._board[index] != EMPTY:
            logger.debug("rejected move at %d (active=%s, cell=%r)",
                         index, self._active, self._board[index])
            return NoOp()

        player = self._current_player
        self._board[index] = player
        logger.debug("player %s took cell %d", player, index)

        triple = self.check_win()
        if triple is not None:
            self._active = False
            self._status = RoundStatus.WON
            self._winner = player
            self._winning_triple = triple
            self._scores[player] += 1            # once per won round
            logger.info("player %s wins on %s (score %s)",
                        player, triple, self._scores)
            result = WinResult(player, triple)
        elif self.check_draw():
            self._active = False
            self._status = RoundStatus.DRAWN
            logger.info("round drawn")
            result = DrawResult()
        else:
            self._current_player = other_symbol(player)
            result = ContinueResult(self._current_player)

        self._notify(result)
        return result

    def check_win(self):
        """
        scan the 8 patterns in fixed order, first full line wins
        """
        b = self._board
        for triple in WIN_PATTERNS:
            a, m, c = triple
            if b[a] != EMPTY and b[a] == b[m] == b[c]:
                return triple
        return None

    def check_draw(self):
        # only meaningful after check_win came back empty
        return all(cell != EMPTY for cell in self._board)

    def restart(self):
        """
        clear board for a new round, keep scores
        """
        self._new_round()
        logger.info("new round, scores %s", self._scores)
        self._notify(ResetEvent())
