"""cssvars: generate typed CSS custom properties from a JavaScript object literal."""

__version__ = "0.1.0"
