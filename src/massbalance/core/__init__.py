"""Configuration and logging shared by the mass and balance tools."""
