"""Processing pipelines."""

from .map_pipeline import EXPORT_FORMATS, PATH_MODES, MapPipeline

__all__ = ["EXPORT_FORMATS", "PATH_MODES", "MapPipeline"]
