"""Game logic for a vertical space shooter: movement, formations, collision detection, YAML levels and menus."""

__version__ = "0.1.0"

__all__ = [
    "movement",
    "formation",
    "collision_rules",
    "quadtree",
    "bvh",
    "detector",
    "level",
    "level_loader",
    "level_manager",
    "menu",
]