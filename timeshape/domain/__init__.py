"""Domain layer: time values and the pure conversions over them."""
