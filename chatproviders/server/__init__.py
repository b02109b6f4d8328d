"""HTTP surface exposing the model list."""
