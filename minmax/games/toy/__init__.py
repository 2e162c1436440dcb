"""Toy games for testing and demonstrating the search."""

from .letter_game import LETTERS, LetterGame, LetterState, describe_letter_node, letter_evaluator
from .tictactoe import TicTacToeGame, TicTacToeState, tictactoe_evaluator
from ...registry import list_games, register_game

if "letters" not in list_games():
    register_game("letters", LetterGame, letter_evaluator)
if "tictactoe" not in list_games():
    register_game("tictactoe", TicTacToeGame, tictactoe_evaluator)

__all__ = [
    "LETTERS",
    "LetterGame",
    "LetterState",
    "TicTacToeGame",
    "TicTacToeState",
    "describe_letter_node",
    "letter_evaluator",
    "tictactoe_evaluator",
]
