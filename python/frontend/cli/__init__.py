"""Terminal frontends for the sliding puzzle."""
