"""Static assets bundled into every generated site."""
