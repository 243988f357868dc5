"""Tests for the Streamlit web interface."""

from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

WEB_SCRIPT = Path(__file__).parent.parent / "src" / "typesize" / "web.py"


@pytest.fixture
def app() -> AppTest:
    """Run the web app once."""
    at = AppTest.from_file(str(WEB_SCRIPT), default_timeout=30)
    at.run()
    assert not at.exception
    return at


class TestStreamlitUI:
    """Tests for Streamlit UI elements."""

    def test_title(self, app: AppTest) -> None:
        """Test that the page has the calculator title."""
        assert app.title[0].value == "Type Size Calculator"

    def test_default_verdict(self, app: AppTest) -> None:
        """Test that the default inputs are non-compliant."""
        assert "Non-Compliant for Touch Interactives" in app.error[0].value

    def test_screen_inputs_enabled_for_custom(self, app: AppTest) -> None:
        """Test that geometry inputs are editable for custom."""
        assert app.number_input(key="width_px").disabled is False


class TestStreamlitInteraction:
    """Tests for Streamlit UI interactions."""

    def test_select_preset(self, app: AppTest) -> None:
        """Test that a preset fills geometry and sets 2 feet."""
        app.selectbox(key="preset").set_value("4k-55").run()
        assert app.number_input(key="width_px").value == 3840
        assert app.number_input(key="diagonal_in").value == 55
        assert app.number_input(key="view_dist_ft").value == 2
        assert app.number_input(key="width_px").disabled is True

    def test_revert_to_custom_clears_distance(self, app: AppTest) -> None:
        """Test that going back to custom clears the preset distance."""
        app.selectbox(key="preset").set_value("hd-27").run()
        app.selectbox(key="preset").set_value("custom").run()
        assert app.number_input(key="view_dist_ft").value is None
        assert app.number_input(key="diagonal_in").value == 27

    def test_revert_keeps_user_distance(self, app: AppTest) -> None:
        """Test that a user distance survives going back to custom."""
        app.selectbox(key="preset").set_value("hd-27").run()
        app.number_input(key="view_dist_ft").set_value(5.0).run()
        app.selectbox(key="preset").set_value("custom").run()
        assert app.number_input(key="view_dist_ft").value == 5

    def test_large_type_is_compliant(self, app: AppTest) -> None:
        """Test that raising the design size flips the verdict."""
        app.number_input(key="design_size_px").set_value(40.0).run()
        assert "ADA Compliant for Touch Interactives" in app.success[0].value
