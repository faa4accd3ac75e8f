"""Application entry point for notify-relay."""

from __future__ import annotations

from notify_relay.app.cli import cli

__all__ = ["main"]


def main() -> None:
    """Run the notify-relay command line."""
    cli(prog_name="notify-relay")


if __name__ == "__main__":
    main()
