from slider.models.board import Board, InvalidBoardError

__all__ = ["Board", "InvalidBoardError"]
