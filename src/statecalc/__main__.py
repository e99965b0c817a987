"""Allow ``python -m statecalc``."""

from statecalc.cli import app

if __name__ == "__main__":
    app()
