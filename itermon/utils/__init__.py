"""Small helpers shared by iterative algorithms: logging, RNG, formatting, text."""
