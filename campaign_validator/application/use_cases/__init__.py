"""Application use cases built on top of the validation engine."""
