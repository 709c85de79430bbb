from tasklist import theme


def test_theme_file_exists():
    assert theme.THEME_FILE.is_file()


def test_load_css_reads_priority_styles():
    css = theme.load_css()
    assert ".task-item.high" in css
    assert ".task-item.low" in css


def test_load_css_missing_file(tmp_path):
    assert theme.load_css(str(tmp_path / "nope.css")) is None


def test_set_theme():
    # Outside a Streamlit runtime the st.* calls are no-ops; nothing should raise.
    try:
        assert theme.set_theme(page_title="Test Tasks", page_icon="🧪") is True
    except Exception as e:
        assert False, f"set_theme raised an exception: {e}"
