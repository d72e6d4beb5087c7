"""Key transformation for selected objects."""

from .key_transform import TransformRule, expand_template, relative_key, transform_key

__all__ = ["TransformRule", "expand_template", "relative_key", "transform_key"]
