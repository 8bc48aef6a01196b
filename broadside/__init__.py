"""Two-player naval combat game engine."""
