"""Entry point for ``python -m llm_pricing``."""

from llm_pricing.cli import app

if __name__ == "__main__":
    app()
