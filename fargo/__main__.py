"""
Entry point for running fargo as a module.

Usage: python -m fargo [command] [options]
"""

from fargo.cli.parser import main

if __name__ == "__main__":
    main()
