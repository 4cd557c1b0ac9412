"""
Entry point for running Quest as a module.

Usage:
    python -m quest map
    python -m quest play basics-1
    python -m quest --help
"""
from .delivery.cli import main

if __name__ == "__main__":
    main()
