"""Terminal frontends for the tile-connect engine."""
