"""Feature modules, each split into domain, data and presentation layers."""
