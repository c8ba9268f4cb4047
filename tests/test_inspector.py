import pytest

from cicero.core.exceptions import FontSourceUnavailable
from cicero.inspector import PAGE_STEP, Inspector
from cicero.settings import Settings


def test_typing_rebuilds_rows(scan_settings: Settings) -> None:
    inspector = Inspector(scan_settings)
    assert len(inspector.graphemes) == 0
    inspector.type_text("AB")
    assert inspector.text == "AB"
    assert len(inspector.graphemes) == 3
    inspector.select_next()
    assert inspector.graphemes.selected_code_point() == "B"

    inspector.type_text("\u0301")
    assert inspector.graphemes.selected == 0
    assert len(inspector.graphemes) == 4


def test_backspace_removes_last_code_point(scan_settings: Settings) -> None:
    inspector = Inspector(scan_settings, "ae\u0301")
    inspector.backspace()
    assert inspector.text == "ae"
    inspector.backspace()
    inspector.backspace()
    inspector.backspace()
    assert inspector.text == ""
    assert inspector.graphemes.selected is None


def test_paging_moves_by_page_step(scan_settings: Settings) -> None:
    inspector = Inspector(scan_settings, "x" * (PAGE_STEP + 5))
    inspector.page_down()
    assert inspector.graphemes.selected == 2 * PAGE_STEP
    inspector.page_down()
    assert inspector.graphemes.selected == len(inspector.graphemes) - 1
    inspector.page_up()
    inspector.page_up()
    assert inspector.graphemes.selected == 0


def test_detail_follows_selection(scan_settings: Settings) -> None:
    inspector = Inspector(scan_settings, "AB")
    detail = inspector.open_detail()
    assert detail is not None
    assert detail.char == "A"
    assert inspector.detail_properties().name == "LATIN CAPITAL LETTER A"

    inspector.select_next()
    assert inspector.detail.char == "B"
    inspector.close_detail()
    assert not inspector.detail_open
    inspector.select_previous()
    assert inspector.detail is None
    assert inspector.detail_properties() is None


def test_selected_font_survives_navigation(scan_settings: Settings) -> None:
    inspector = Inspector(scan_settings, "AAB")
    inspector.open_detail()
    assert inspector.next_font().family_name == "Beta"
    assert inspector.selected_font_path is not None
    assert inspector.selected_font_path.name == "Beta-Regular.ttf"

    inspector.select_next()
    assert inspector.detail.current_font().family_name == "Beta"
    # No glyph for B in Beta: the first candidate is shown but Beta stays remembered.
    inspector.select_next()
    assert inspector.detail.current_font().family_name == "Alpha"
    assert inspector.selected_font_path.name == "Beta-Regular.ttf"

    assert inspector.previous_font().family_name == "Alpha"
    assert inspector.selected_font_path.name == "Alpha-Regular.ttf"


def test_font_cycling_without_detail_is_noop(scan_settings: Settings) -> None:
    inspector = Inspector(scan_settings, "A")
    assert inspector.next_font() is None
    assert inspector.previous_font() is None
    assert inspector.selected_font_path is None


def test_open_detail_without_text_keeps_state(scan_settings: Settings) -> None:
    inspector = Inspector(scan_settings)
    assert inspector.open_detail() is None
    assert inspector.detail is None


def test_open_detail_propagates_missing_source() -> None:
    inspector = Inspector(Settings(use_fontconfig=False), "A")
    with pytest.raises(FontSourceUnavailable):
        inspector.open_detail()
