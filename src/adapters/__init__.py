"""Input and output adapters around the core handler chain."""
