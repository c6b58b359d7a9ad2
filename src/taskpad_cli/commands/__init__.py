"""Command modules of taskpad-cli."""
