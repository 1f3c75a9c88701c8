"""Utility helpers for KubeInspect."""

from kubeinspect.utils.resource_gvr import resource_gvr
from kubeinspect.utils.resource_parser import parse_quantity

__all__ = [
    "parse_quantity",
    "resource_gvr",
]
