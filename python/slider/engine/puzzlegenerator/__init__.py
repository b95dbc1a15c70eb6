from slider.engine.puzzlegenerator.generator import PuzzleGenerator

__all__ = ["PuzzleGenerator"]
