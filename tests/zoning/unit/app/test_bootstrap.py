from zoning.app.bootstrap import build_zoning_session
from zoning.core.geometry import Rect
from zoning.infra.config import ZoningConfig


def test_session_shares_one_zone_system() -> None:
    session = build_zoning_session(ZoningConfig(cell_size=2.0, coord_precision=4))

    assert session.zone_system.tolerance == 2.0
    assert session.snapper.cell_size == 2.0
    assert session.renderer.layers == ()

    session.drawing.press(0, 0)
    assert session.drawing.release(4.1, 3.9)

    assert session.zone_system.rects == (Rect(0.0, 0.0, 4.0, 4.0),)
    assert len(session.renderer.layers) == 1
    assert session.summary().lines() == ("Distinct Areas: 1", "Total Squares: 4")


def test_session_defaults() -> None:
    session = build_zoning_session()
    assert session.config == ZoningConfig()
    assert session.zone_system.tolerance == 1.0
