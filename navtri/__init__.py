"""Public package API for navtri.

Incremental 2D Delaunay triangulation of (x, y, z) points, where ``z`` is a
height carried through untouched, plus the navmesh polygon export built on
top of it.

Example
-------
    from navtri import triangulate

    result = triangulate([(0, 0, 0), (1, 0, 0), (1, 1, 0), (0, 1, 0)])
    len(result.triangles), len(result.edges)   # 2, 6

The deeper modules (``navtri.core.*``) are considered internal and may
change; rely on this layer for public symbols. Plotting lives in
``navtri.core.visualization`` and is not imported here so that
``import navtri`` does not pull in matplotlib.
"""
from importlib import import_module as _imp
import logging as _logging

try:
    from importlib.metadata import version as _pkg_version
    __version__ = _pkg_version("navtri-mesh")
except Exception:  # pragma: no cover - editable / unknown state
    __version__ = "0.0.0+dev"

_logging.getLogger(__name__).addHandler(_logging.NullHandler())

_const = _imp('navtri.core.constants')
_prims = _imp('navtri.core.primitives')
_tri = _imp('navtri.core.triangulation')
_cfg = _imp('navtri.core.config')
_nav = _imp('navtri.core.navmesh')
_io = _imp('navtri.core.io')
_diag = _imp('navtri.core.diagnostics')
_log = _imp('navtri.core.logging_utils')

# primitives
Point = _prims.Point
Edge = _prims.Edge
Circumcircle = _prims.Circumcircle
Triangle = _prims.Triangle

# triangulation
triangulate = _tri.triangulate
triangulate_many = _tri.triangulate_many
Triangulator = _tri.Triangulator
TriangulationResult = _tri.TriangulationResult
DegenerateInputError = _tri.DegenerateInputError

# configuration / tolerances
TriangulationConfig = _cfg.TriangulationConfig
NavMeshExportConfig = _cfg.NavMeshExportConfig
EPS_CIRCUMCIRCLE = _const.EPS_CIRCUMCIRCLE

# navmesh export and I/O
NavMesh = _nav.NavMesh
build_navmesh = _nav.build_navmesh
export_navmesh = _io.export_navmesh
write_obj = _io.write_obj
read_obj = _io.read_obj
write_vtk = _io.write_vtk

configure_logging = _log.configure_logging

# Namespace submodules
constants = _const
diagnostics = _diag

__all__ = [
    '__version__',
    'Point', 'Edge', 'Circumcircle', 'Triangle',
    'triangulate', 'triangulate_many', 'Triangulator', 'TriangulationResult', 'DegenerateInputError',
    'TriangulationConfig', 'NavMeshExportConfig', 'EPS_CIRCUMCIRCLE',
    'NavMesh', 'build_navmesh', 'export_navmesh', 'write_obj', 'read_obj', 'write_vtk',
    'configure_logging',
    'constants', 'diagnostics',
]
