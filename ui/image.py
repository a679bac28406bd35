"""
Recipe card image markup.

The browser is the image loader: it fetches, caches and cancels the request.
This module only supplies the target URL and the presentation policy. The
markup is a small standalone document rendered in a component frame, since
Streamlit markdown drops event handlers and the fade must start on `load`.
"""

import html
from dataclasses import dataclass


@dataclass(frozen=True)
class ImagePolicy:
    """How a card image is boxed and faded in"""
    height_px: int = 200
    corner_radius_px: int = 16
    border_width_px: int = 1
    border_color: str = "#cac4d0"
    crossfade: bool = True
    crossfade_ms: int = 300

    def __post_init__(self):
        if self.height_px <= 0:
            raise ValueError("height_px must be positive")
        if self.crossfade_ms < 0:
            raise ValueError("crossfade_ms must not be negative")

    @property
    def frame_height_px(self) -> int:
        """Height of the frame holding the image, border included"""
        return self.height_px + 2 * self.border_width_px


LOADED_CLASS = "loaded"


def build_image_html(image_url: str, alt_text: str, policy: ImagePolicy = ImagePolicy()) -> str:
    """
    Build a lazily loaded, cropped image document for a recipe card.

    With crossfade on, the image starts transparent and fades in once its
    `load` event fires; images already in the cache are marked loaded
    straight away. URL and alt text are escaped since both come from
    search results.
    """
    image_styles = [
        "display: block",
        "box-sizing: border-box",
        "width: 100%",
        f"height: {policy.frame_height_px}px",
        "object-fit: cover",
        f"border: {policy.border_width_px}px solid {policy.border_color}",
        f"border-radius: {policy.corner_radius_px}px",
    ]
    fade_css = ""
    onload = ""
    if policy.crossfade:
        image_styles += ["opacity: 0", f"transition: opacity {policy.crossfade_ms}ms ease-in"]
        fade_css = f".recipe-image.{LOADED_CLASS} {{ opacity: 1; }}"
        onload = f' onload="this.classList.add(\'{LOADED_CLASS}\')"'

    document = (
        f'<style>body {{ margin: 0; }} .recipe-image {{ {"; ".join(image_styles)}; }} {fade_css}</style>'
        f'<img class="recipe-image" src="{html.escape(image_url, quote=True)}" '
        f'alt="{html.escape(alt_text, quote=True)}" loading="lazy" decoding="async"{onload}>'
    )
    if policy.crossfade:
        document += (
            "<script>"
            "const img = document.querySelector('.recipe-image');"
            f"if (img.complete && img.naturalWidth) {{ img.classList.add('{LOADED_CLASS}'); }}"
            "</script>"
        )
    return document
