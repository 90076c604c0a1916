"""Planar

Plane geometry for real-time 3D pipelines
"""
# flake8: noqa

from planar.exception import *
from planar.math.plane import Plane


__version__ = "0.2.0"
