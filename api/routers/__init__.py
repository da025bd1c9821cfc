"""Routery API: shapes, tiles, pathfinding."""
