#!/usr/bin/env python3
"""
Test script for card image markup, screen styles and configuration.
"""

import sys
from pathlib import Path

import pytest

# Add the project root to the path
sys.path.insert(0, str(Path(__file__).parent))

from ui.image import ImagePolicy, build_image_html
from ui.layout import ResponsiveDesign, BREAKPOINTS
from utils.config import Config


def test_image_html_fades_in_on_load():
    """Test card images load lazily and only fade in once loaded"""
    markup = build_image_html("https://example.com/a.jpg", "Apple Crumble")
    assert 'loading="lazy"' in markup
    assert "opacity: 0" in markup
    assert "transition: opacity 300ms" in markup
    assert ".recipe-image.loaded { opacity: 1; }" in markup
    assert "onload=\"this.classList.add('loaded')\"" in markup
    assert "img.complete" in markup
    assert "animation" not in markup
    assert "height: 202px" in markup
    assert "border-radius: 16px" in markup
    assert "object-fit: cover" in markup
    print("[OK] Image fades in on its load event")


def test_image_html_escapes_values():
    """Test titles and URLs from search results are escaped"""
    markup = build_image_html('https://example.com/a.jpg" onerror="x', "<b>Pie</b>")
    assert '" onerror="' not in markup
    assert "<b>" not in markup
    assert "&lt;b&gt;Pie&lt;/b&gt;" in markup


def test_image_policy_without_crossfade():
    """Test the crossfade can be disabled"""
    markup = build_image_html("u", "t", ImagePolicy(crossfade=False, height_px=120))
    assert "opacity: 0" not in markup
    assert "onload" not in markup
    assert "height: 122px" in markup
    assert ImagePolicy(height_px=120).frame_height_px == 122
    with pytest.raises(ValueError):
        ImagePolicy(height_px=0)


def test_css_card_colors():
    """Test the stylesheet carries the ingredient match colors"""
    css = ResponsiveDesign().build_css()
    assert "#119c6e" in css and "#e34840" in css


def test_breakpoints_ordered():
    """Test width classes are ordered"""
    assert BREAKPOINTS['compact'] < BREAKPOINTS['medium']


def test_config_from_environment(monkeypatch):
    """Test environment overrides for layout settings"""
    monkeypatch.setenv("INGREDILY_DUAL_PANE_MIN_WIDTH", "700")
    monkeypatch.setenv("INGREDILY_DEBUG", "true")
    config = Config.from_environment()
    assert config.dual_pane_min_width == 700
    assert config.debug_mode is True
    assert config.image_height_px == 200


def test_config_rejects_invalid_threshold():
    """Test invalid layout threshold is rejected"""
    with pytest.raises(ValueError):
        Config(dual_pane_min_width=0)
