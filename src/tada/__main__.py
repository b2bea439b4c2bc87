"""
tada CLI entrypoint.

Executed via:
  python -m tada
"""

from tada.cli.app import app

if __name__ == "__main__":
    app()
