"""
Adaptive layout utilities and CSS for the recipes screen.

Derives single- or dual-pane presentation from the viewport width and
injects the card and pane styles used by the screen renderer.
"""

import streamlit as st
from enum import Enum
from typing import Optional

from .image import ImagePolicy


class LayoutMode(Enum):
    """Pane presentation derived from the available width"""
    SINGLE_PANE = "single_pane"
    DUAL_PANE = "dual_pane"


# Width classes for window sizes (px)
BREAKPOINTS = {
    'compact': 600,
    'medium': 840,
}


def layout_mode_for_width(width: int, dual_pane_min_width: Optional[int] = None) -> LayoutMode:
    """
    Compute the layout mode for a viewport width.

    Only expanded widths show list and detail side by side.

    Args:
        width: Viewport width in px
        dual_pane_min_width: Threshold override, defaults to the medium breakpoint
    """
    threshold = dual_pane_min_width if dual_pane_min_width is not None else BREAKPOINTS['medium']
    if width < 0:
        raise ValueError(f"Viewport width must not be negative, got {width}")
    return LayoutMode.DUAL_PANE if width >= threshold else LayoutMode.SINGLE_PANE


class ResponsiveDesign:
    """
    Injects the recipes screen styles.

    Streamlit has no viewport detection, so the width signal is supplied by
    the caller and this class only handles presentation.
    """

    def __init__(self, image_policy: Optional[ImagePolicy] = None):
        self.image_policy = image_policy or ImagePolicy()

    def build_css(self) -> str:
        """Build the screen stylesheet"""
        return f"""
        <style>
        .recipes-heading {{
            font-size: 1.5rem;
            margin-bottom: 28px;
        }}

        .recipe-card {{
            margin-bottom: 20px;
        }}

        .recipe-title-row {{
            display: flex;
            justify-content: space-between;
            align-items: center;
            margin-top: 8px;
        }}

        .recipe-title {{
            flex: 3.5;
            font-size: 1.35rem;
            font-weight: 500;
        }}

        .recipe-likes {{
            flex: 1;
            text-align: right;
            font-size: 0.9rem;
            color: #625b71;
        }}

        .icon-text-row {{
            display: flex;
            align-items: center;
            gap: 4px;
            font-size: 0.8rem;
            color: #625b71;
        }}

        .icon-ok {{ color: #119c6e; }}
        .icon-missing {{ color: #e34840; }}
        .icon-like {{ color: #79747e; }}

        .screen-placeholder {{
            text-align: center;
            padding: 3rem 1rem;
            color: #666;
        }}

        .screen-placeholder .placeholder-icon {{
            font-size: 4rem;
            margin-bottom: 1rem;
        }}

        /* Touch-friendly cards */
        .stButton button {{
            min-height: 44px;
            touch-action: manipulation;
        }}
        </style>
        """

    def inject_css(self):
        """Inject the screen stylesheet into the page"""
        st.markdown(self.build_css(), unsafe_allow_html=True)


def create_responsive_layout(image_policy: Optional[ImagePolicy] = None) -> ResponsiveDesign:
    """Create the layout helper and inject its styles"""
    responsive = ResponsiveDesign(image_policy)
    responsive.inject_css()
    return responsive
