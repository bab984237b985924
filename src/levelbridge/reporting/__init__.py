"""Text and JSON renderers for CLI output."""

from .render import classification_to_dict, render_classification, render_resolution, resolution_to_dict

__all__ = ["classification_to_dict", "render_classification", "render_resolution", "resolution_to_dict"]
