from slider.frontend.cli.rich.app import render, run

__all__ = ["render", "run"]
