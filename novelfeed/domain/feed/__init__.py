"""Feed domain module: grouping of recent chapter updates."""
