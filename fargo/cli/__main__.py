"""
Entry point for running fargo CLI as a module.

Usage: python -m fargo.cli [command] [options]
"""

from .parser import main

if __name__ == "__main__":
    main()
