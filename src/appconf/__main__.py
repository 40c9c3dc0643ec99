from __future__ import annotations

from appconf.cli import app

if __name__ == "__main__":
    app()
