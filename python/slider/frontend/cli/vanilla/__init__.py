from slider.frontend.cli.vanilla.app import render, run

__all__ = ["render", "run"]
