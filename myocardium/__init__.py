"""Holzapfel-Ogden uncoupled hyperelastic material model for myocardium, with tensor helpers and a name registry."""

__version__ = "0.1.0"
__all__ = ["material", "registry", "tensors"]