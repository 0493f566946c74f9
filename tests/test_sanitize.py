from pagegen.core.sanitize import extract_html


def test_strips_preamble_and_postamble():
    raw = "noise<!DOCTYPE html>...body...</html>trailing junk"
    assert extract_html(raw) == "<!DOCTYPE html>...body...</html>"


def test_no_markers_returns_input_unchanged():
    assert extract_html("just some text") == "just some text"


def test_missing_end_marker_runs_to_end_of_string():
    assert extract_html("Sure!<!DOCTYPE html><p>cut off") == "<!DOCTYPE html><p>cut off"


def test_missing_start_marker_keeps_head():
    assert extract_html("<html><p>x</p></html>\nHope you like it") == "<html><p>x</p></html>"


def test_uses_first_start_and_last_end():
    raw = "a<!DOCTYPE html>1</html><!DOCTYPE html>2</html>b"
    assert extract_html(raw) == "<!DOCTYPE html>1</html><!DOCTYPE html>2</html>"


def test_end_marker_before_start_keeps_tail():
    raw = "see </html> below <!DOCTYPE html><p>x"
    assert extract_html(raw) == "<!DOCTYPE html><p>x"


def test_empty_string():
    assert extract_html("") == ""
