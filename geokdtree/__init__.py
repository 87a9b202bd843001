"""KD-tree index for great-circle radius searches over points on a sphere, with a benchmark."""

__version__ = "0.1.0"
__all__ = ["geo_point", "search_box", "sphere_helper", "kd_tree", "benchmark"]