"""Configuration — template root and placeholder contract loading."""
