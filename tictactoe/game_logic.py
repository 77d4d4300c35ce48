import random
from enum import Enum

BOARD_SIZE = 3      # fixed 3x3 grid
MIN_COORD = 1       # 1-based coords on the outside
MAX_COORD = 3


class Mark(Enum):
    """
    player symbol, value is what gets printed
    """
    X = 'X'
    O = 'O'

    @property
    def opponent(self):
        return Mark.O if self is Mark.X else Mark.X

    def __str__(self):
        return self.value


class GameStatus(Enum):
    AWAITING_MOVE = "awaiting_move"
    WON = "won"
    DRAW = "draw"


class MoveResult(Enum):
    """
    outcome of one attempted move
    """
    CONTINUE = "continue"
    WIN = "win"
    DRAW = "draw"
    INVALID = "invalid"     # malformed coords
    OCCUPIED = "occupied"
    GAME_OVER = "game_over"


def are_coords_correct(coords):
    """
    true if text is exactly two unsigned ints, each 1..3
    """
    tokens = coords.split()
    if len(tokens) != 2:
        return False
    for token in tokens:
        # isdigit lets through unicode digits, int() takes signs
        if not (token.isascii() and token.isdigit()):
            return False
        try:
            value = int(token)
        except ValueError:
            # longer than the int() digit limit
            return False
        if not MIN_COORD <= value <= MAX_COORD:
            return False
    return True


def parse_coords(coords):
    """
    '2 3' -> (1, 2), or None if not correct
    """
    if not are_coords_correct(coords):
        return None
    row, col = (int(token) - 1 for token in coords.split())
    return row, col


class GameLogic:
    """
    tic-tac-toe rules and state
    """
    def __init__(self, rng=None):
        """
        init board and counters, coin flip for who starts
        """
        self.board_size = BOARD_SIZE
        self._rng = rng if rng is not None else random
        self.reset_game()

    def reset_game(self):
        """
        clear board and reset flags
        """
        self.game_board = [[None for _ in range(self.board_size)]
                           for _ in range(self.board_size)]  # empty cells
        self.current_player = self._coin_flip()
        self.move_count = 0               # how many moves done
        self.won = False
        self.winner = None                # Mark or None
        self.status = GameStatus.AWAITING_MOVE

    def _coin_flip(self):
        return Mark.X if self._rng.random() < 0.5 else Mark.O

    def _switch_player(self):
        self.current_player = self.current_player.opponent

    def is_over(self):
        return self.status is not GameStatus.AWAITING_MOVE

    def play(self, coords):
        """
        validate raw 'row col' text then apply it
        """
        parsed = parse_coords(coords)
        if parsed is None:
            return MoveResult.INVALID
        return self.make_move(*parsed)

    def make_move(self, row, col):
        """
        place current player's mark at 0-based (row, col), check result
        returns a MoveResult; the turn only advances on CONTINUE
        """
        if not (0 <= row < self.board_size and 0 <= col < self.board_size):
            raise ValueError(f"cell ({row}, {col}) is off the board")
        if self.is_over():
            return MoveResult.GAME_OVER
        if self.game_board[row][col] is not None:
            return MoveResult.OCCUPIED

        player = self.current_player
        self.game_board[row][col] = player
        self.move_count += 1               # count this move
        if self.check_win(player):
            # mover keeps the turn so current_player == winner
            self.won = True; self.winner = player
            self.status = GameStatus.WON
            return MoveResult.WIN
        if self.check_draw():
            self.status = GameStatus.DRAW
            return MoveResult.DRAW
        self._switch_player()
        return MoveResult.CONTINUE

    def check_win(self, player):
        """
        scan rows, cols, diags for 3 in a row
        """
        b = self.game_board; n = self.board_size
        # rows and cols
        for i in range(n):
            if all(b[i][j] is player for j in range(n)) \
               or all(b[j][i] is player for j in range(n)):
                return True
        # main diag
        if all(b[i][i] is player for i in range(n)):
            return True
        # anti-diag
        if all(b[i][n - 1 - i] is player for i in range(n)):
            return True
        return False

    def check_draw(self):
        """
        no empty cells and no winner
        """
        return self.move_count == self.board_size * self.board_size \
               and not self.won

    def rows(self):
        # copy so callers can't touch the board
        return [list(row) for row in self.game_board]

