"""Entry point for running repoinit as a module.

This allows running the application with:
    python -m repoinit [OPTIONS]
"""

from repoinit.cli import app

if __name__ == "__main__":
    app()
