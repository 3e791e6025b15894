"""Output layer: renders CodecResult for humans or machines."""
