"""Basic import tests to verify package structure."""


def test_import_tiltsim():
    """Verify main package imports."""
    import tiltsim
    assert tiltsim.__version__ == "0.1.0"


def test_import_core():
    """Verify core module structure exists."""
    from tiltsim import core
    assert hasattr(core, "__doc__")
    assert hasattr(core, "Grid")


def test_import_analysis():
    """Verify analysis module structure exists."""
    from tiltsim import analysis
    assert hasattr(analysis, "load")


def test_import_io():
    """Verify io module structure exists."""
    from tiltsim import io
    assert hasattr(io, "parse_grid")


def test_import_viz():
    """Verify viz module structure exists."""
    from tiltsim import viz
    assert hasattr(viz, "plot_grid")
