"""SPICE kernel pool state and loading."""
