"""Allow running diffmsg as ``python -m diffmsg``."""

from diffmsg.cli import app

if __name__ == "__main__":
    app()
