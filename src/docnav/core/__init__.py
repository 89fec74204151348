"""Navigation core: route tree, index and loaders."""
