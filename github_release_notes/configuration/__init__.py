"""Configuration handling for the command line interface."""
