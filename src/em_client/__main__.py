"""
Entry point for running em-cli as a module.

This allows users to run the CLI using:
    python -m em_client [command] [options]
"""

from em_client.cli.app import main

if __name__ == "__main__":
    main()
