from cssvars.naming import css_variable_name, kebab_case
from cssvars.stylesheet.generator import BANNER, build_descriptors, render_stylesheet

__all__ = [
    "BANNER",
    "build_descriptors",
    "css_variable_name",
    "kebab_case",
    "render_stylesheet",
]
