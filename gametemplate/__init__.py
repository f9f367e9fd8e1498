"""Building blocks for small 2D games: vectors, transforms, components, colliders, physics, input binding and asset data loading."""

__version__ = "0.1.0"