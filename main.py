"""CLI entrypoint for running the transform from a source checkout."""

from serial_catalog.cli import main

if __name__ == "__main__":
    main()
