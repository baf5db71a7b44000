from pathlib import Path

from gui import ui_constants


def test_every_style_key_is_used_by_the_window():
    source = (Path(ui_constants.__file__).parent / "simulation_gui.py").read_text(encoding="utf-8")
    for table in ("FONT_SIZES", "COLORS", "PADDING"):
        for key in getattr(ui_constants, table):
            assert f"{table}['{key}']" in source, f"{table}['{key}'] is never used"


def test_frame_interval_is_about_sixty_fps():
    assert 10 <= ui_constants.FRAME_INTERVAL_MS <= 40
