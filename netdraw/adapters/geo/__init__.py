from .osm_poly import read_osm_poly

__all__ = ["read_osm_poly"]
