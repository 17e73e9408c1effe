"""Runner simulation: physics, spawning, collisions, scoring and game flow."""
