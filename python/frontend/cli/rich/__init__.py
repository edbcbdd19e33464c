"""Rich terminal frontend."""
