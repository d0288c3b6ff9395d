"""Smoke tests for the matplotlib plotting helper."""
from navtri.core.triangulation import triangulate, TriangulationResult
from navtri.core.visualization import plot_triangulation


def test_plot_triangulation_writes_png(tmp_path):
    pts = [(0, 0, 0), (1, 0, 0), (1, 1, 0), (0, 1, 0), (0.5, 0.5, 0)]
    out = tmp_path / "tri.png"
    plot_triangulation(triangulate(pts), str(out), points=pts, show_circles=True)
    assert out.exists() and out.stat().st_size > 0


def test_plot_empty_result(tmp_path):
    out = tmp_path / "empty.png"
    plot_triangulation(TriangulationResult(), str(out), points=[(0, 0), (1, 1)])
    assert out.exists()
