from colorama import Fore, Style, init as colorama_init

from .game_logic import GameLogic, Mark, MoveResult

# -----------------------------------------------------------------------------
# COLOR CONSTANTS
# -----------------------------------------------------------------------------

MARK_COLORS = {
    Mark.X: Fore.CYAN,
    Mark.O: Fore.YELLOW,
}
EMPTY_COLOR = Style.DIM
INFO_COLOR = Fore.WHITE
ERROR_COLOR = Fore.RED
OUTCOME_COLOR = Fore.GREEN + Style.BRIGHT

EMPTY_CELL = '-'


class InputClosedError(Exception):
    """input stream ended while the game still needed a line"""


class ConsoleGame:
    """
    terminal driver: prompt, read a line, hand it to the engine, repeat
    """
    def __init__(self, game=None, read_line=input, write=print, color=True):
        self.game = game if game is not None else GameLogic()
        self.read_line = read_line
        self.write = write
        self.color = color

    def _paint(self, text, color):
        if not self.color:
            return text
        return f"{color}{text}{Style.RESET_ALL}"

    def _mark(self, mark):
        if mark is None:
            return self._paint(EMPTY_CELL, EMPTY_COLOR)
        return self._paint(str(mark), MARK_COLORS[mark])

    def _read(self):
        try:
            return self.read_line()
        except EOFError:
            raise InputClosedError("input stream closed") from None

    def print_banner(self):
        self.write(self._paint("Welcome to CLI tic tac toe!", OUTCOME_COLOR))
        self.write(self._paint(
            "Type a row and column (both between 1 and 3)", INFO_COLOR))

    def print_board(self):
        """
        3 rows of cells, each followed by its 'row col' legend
        """
        self.write("")
        for i, row in enumerate(self.game.rows(), start=1):
            cells = ''.join(f" {self._mark(cell)} " for cell in row)
            legend = ''.join(f"{i} {j}   " for j in range(1, len(row) + 1))
            self.write(f"{cells}    {legend}")
        self.write("")

    def take_turn(self):
        """
        one prompt/read/apply cycle; returns the engine's MoveResult
        """
        self.write(f"It's {self._mark(self.game.current_player)} move")
        self.print_board()

        result = self.game.play(self._read())
        if result is MoveResult.INVALID:
            self.write(self._paint("Enter a correct coordinates", ERROR_COLOR))
        elif result is MoveResult.OCCUPIED:
            self.write(self._paint("This cell is already occupied", ERROR_COLOR))
        return result

    def announce_result(self):
        self.print_board()
        if self.game.won:
            self.write(self._paint(f"{self.game.winner} has won!", OUTCOME_COLOR))
        else:
            self.write(self._paint("Draw!", OUTCOME_COLOR))

    def wait_for_exit(self):
        # keep the terminal open until one more line comes in
        self.write("Press Enter to exit.")
        self._read()

    def run(self):
        """
        full game: banner, turns until win or draw, outcome, exit wait
        returns the process exit status
        """
        self.print_banner()
        while not self.game.is_over():
            self.take_turn()
        self.announce_result()
        self.wait_for_exit()
        return 0


def main():
    colorama_init(autoreset=True)
    try:
        return ConsoleGame().run()
    except InputClosedError:
        print(f"\n{ERROR_COLOR}[!] Input stream closed.{Style.RESET_ALL}")
        return 1
    except KeyboardInterrupt:
        print(f"\n{ERROR_COLOR}[!] Game interrupted by user (Ctrl+C).{Style.RESET_ALL}")
        return 130

