"""kitty-cli -- scaffolds feature modules under ``src/features``."""

__version__ = "1.0.0"
