"""Application core: settings, logging and dependency wiring."""
