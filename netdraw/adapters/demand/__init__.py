from .od_pairs import import_od_pairs

__all__ = ["import_od_pairs"]
