#!/usr/bin/env python3
"""
Ingredily - Searched Recipes Screen

Shows the recipes found for the user's ingredients as cards, with an
adaptive list/detail layout. Run with `streamlit run main.py`.
"""

import sys
import streamlit as st
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Add the project root to the path
sys.path.insert(0, str(Path(__file__).parent))

from models import DataStatus
from services import SearchStateProvider, get_search_state_provider, load_searched_recipes
from ui import ImagePolicy, ListDetailNavigator, create_recipes_screen, create_responsive_layout
from utils import get_config, setup_logging, get_logger

logger = get_logger(__name__)

PROVIDER_KEY = 'search_state_provider'

STATUS_LABELS = {
    DataStatus.INITIAL: "Initial",
    DataStatus.LOADING: "Loading",
    DataStatus.SUCCESS: "Success",
    DataStatus.ERROR: "Error",
}


def get_search_state_provider_singleton(navigator: ListDetailNavigator) -> SearchStateProvider:
    """Get the per-session search-state provider, wired to reset navigation"""
    if PROVIDER_KEY not in st.session_state:
        provider = get_search_state_provider()

        def on_state_change(ui_state):
            # A selection only lives as long as the results it was made in
            if ui_state.searched_recipes_data_state.status is not DataStatus.SUCCESS:
                navigator.reset()

        provider.subscribe(on_state_change)
        st.session_state[PROVIDER_KEY] = provider

    return st.session_state[PROVIDER_KEY]


def publish_status(provider: SearchStateProvider, status: DataStatus, sample_data_path: str):
    """Drive the provider from the sidebar status picker"""
    if status is DataStatus.INITIAL:
        provider.reset()
    elif status is DataStatus.LOADING:
        provider.start_search()
    elif status is DataStatus.ERROR:
        provider.publish_error()
    elif status is DataStatus.SUCCESS:
        try:
            recipes = load_searched_recipes(sample_data_path)
        except ValueError as e:
            logger.error(f"Could not load sample results: {e}")
            st.sidebar.error(f"Could not load sample results: {e}")
            provider.publish_error()
            return
        provider.publish_results(recipes)


def render_sidebar(provider: SearchStateProvider, navigator: ListDetailNavigator, config):
    """Sidebar controls standing in for the search flow and the device"""
    st.sidebar.title("🥕 Ingredily")
    st.sidebar.markdown("*Recipes from what you have*")

    current = provider.ui_state.searched_recipes_data_state.status
    statuses = list(STATUS_LABELS.keys())
    st.sidebar.radio(
        "Search state",
        statuses,
        index=statuses.index(current),
        format_func=lambda status: STATUS_LABELS[status],
        key="sidebar_search_state",
        on_change=lambda: publish_status(
            provider, st.session_state.sidebar_search_state, config.sample_data_path
        )
    )

    # Streamlit cannot read the viewport width, so it is supplied here
    width = st.sidebar.slider(
        "Viewport width (px)",
        min_value=320,
        max_value=1600,
        value=navigator.width,
        step=4,
        key="sidebar_viewport_width"
    )
    navigator.update_width(width)
    st.sidebar.caption(f"Layout: {navigator.layout_mode.name.replace('_', ' ').lower()}")

    if config.debug_mode and st.sidebar.checkbox("🔧 Debug Mode"):
        st.sidebar.markdown("### Debug Info")
        st.sidebar.write(f"Panes: {navigator.pane_state.name}")
        st.sidebar.write("Session State Keys:")
        for key in st.session_state.keys():
            st.sidebar.write(f"• {key}")


def main():
    """Main application entry point"""
    st.set_page_config(
        page_title="Ingredily",
        page_icon="🥕",
        layout="wide",
        initial_sidebar_state="expanded"
    )

    config = get_config()
    setup_logging()

    image_policy = ImagePolicy(
        height_px=config.image_height_px,
        corner_radius_px=config.image_corner_radius_px,
        crossfade_ms=config.crossfade_ms
    )
    responsive = create_responsive_layout(image_policy)

    navigator = ListDetailNavigator(
        initial_width=config.default_viewport_width,
        dual_pane_min_width=config.dual_pane_min_width
    )
    provider = get_search_state_provider_singleton(navigator)

    render_sidebar(provider, navigator, config)

    screen = create_recipes_screen(navigator, responsive)
    screen.render(provider.ui_state)


if __name__ == "__main__":
    main()
