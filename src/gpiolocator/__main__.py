"""Main entry point for gpiolocator."""

from gpiolocator.cli.main import cli

if __name__ == "__main__":
    cli()
