"""Seeded random generation of moons, with weighted CSV catalogs, tags, logging, transforms, 2D particles and star visuals."""

__version__ = "0.1.0"