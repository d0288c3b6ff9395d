"""Smoke test for the flat public API layer (`navtri/__init__.py`)."""


def test_import_navtri_smoke():
    import navtri
    assert hasattr(navtri, 'triangulate')
    assert hasattr(navtri, 'export_navmesh')
    assert navtri.EPS_CIRCUMCIRCLE == navtri.constants.EPS_CIRCUMCIRCLE
    result = navtri.triangulate([(0, 0, 0), (1, 0, 0), (1, 1, 0), (0, 1, 0)])
    assert (len(result.triangles), len(result.edges)) == (2, 6)


def test_configure_logging_isolated_from_root():
    import logging
    from navtri.core.logging_utils import configure_logging, get_logger
    configure_logging('DEBUG')
    root = logging.getLogger('navtri')
    assert root.level == logging.DEBUG
    assert root.propagate is False
    assert any(not isinstance(h, logging.NullHandler) for h in root.handlers)
    assert get_logger('navtri.test').getEffectiveLevel() == logging.DEBUG
    configure_logging('WARNING')
