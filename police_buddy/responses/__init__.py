"""Response composition module."""

from .composer import ResponseComposer, ordinal, ordinal_suffix, render_case_details
from .templates import TEMPLATES, render

__all__ = [
    "ResponseComposer",
    "TEMPLATES",
    "ordinal",
    "ordinal_suffix",
    "render",
    "render_case_details",
]
