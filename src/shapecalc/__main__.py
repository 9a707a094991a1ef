"""Entry point for `python -m shapecalc`."""
from shapecalc.cli import app

if __name__ == "__main__":
    app(prog_name="shapecalc")
