from dataclasses import dataclass
from typing import List, Optional

import streamlit as st
from pyrsistent import thaw

from visiprint.config import (
    DEFAULT_HEIGHT,
    DEFAULT_NUM_LEVELS,
    DEFAULT_WIDTH,
)
from visiprint.errors import InvalidDimensions, PaletteTooSmall
from visiprint.grid import Grid
from visiprint.palettes import DEFAULT_CHARACTERS, PALETTE_REGISTRY
from visiprint.renderer.image import render_image
from visiprint.renderer.text import render_framed_text
from visiprint.utils.color import hex_color
from visiprint.utils.digest import (
    ALGORITHMS,
    DEFAULT_ALGORITHM,
    digest,
    parse_hex_fingerprint,
)
from visiprint.walk import generate

st.set_page_config(layout="wide", page_title="Visiprint")


@dataclass(frozen=True)
class AppConfig:
    text: str
    input_is_hex: bool
    algorithm: str
    width: int
    height: int
    num_levels: int
    scale: int
    palette: str
    characters: str


def set_default_config() -> None:
    if "config" not in st.session_state:
        st.session_state["config"] = AppConfig(
            text="hello world",
            input_is_hex=False,
            algorithm=DEFAULT_ALGORITHM,
            width=DEFAULT_WIDTH,
            height=DEFAULT_HEIGHT,
            num_levels=DEFAULT_NUM_LEVELS,
            scale=8,
            palette="default",
            characters=DEFAULT_CHARACTERS,
        )


def get_config_from_widgets() -> AppConfig:
    config: AppConfig = st.session_state["config"]

    st.subheader("Input")
    text: str = st.text_area("Text or hex fingerprint", config.text, key="text")
    input_is_hex: bool = st.checkbox(
        "Input is a hex fingerprint (no hashing)", config.input_is_hex, key="is_hex"
    )
    algorithm: str = st.selectbox(
        "Digest",
        ALGORITHMS,
        index=ALGORITHMS.index(config.algorithm),
        key="algorithm",
        disabled=input_is_hex,
    )

    st.subheader("Grid")
    width: int = st.slider("Width", 8, 64, config.width, key="width")
    height: int = st.slider("Height", 8, 64, config.height, key="height")
    num_levels: int = st.slider("Levels", 3, 16, config.num_levels, key="num_levels")

    st.subheader("Rendering")
    scale: int = st.slider("Scale", 1, 32, config.scale, key="scale")
    palette_names: List[str] = sorted(PALETTE_REGISTRY)
    palette: str = st.selectbox(
        "Colours",
        palette_names,
        index=palette_names.index(config.palette),
        key="palette",
    )
    characters: str = st.text_input("Characters", config.characters, key="chars")

    return AppConfig(
        text=text,
        input_is_hex=input_is_hex,
        algorithm=algorithm,
        width=width,
        height=height,
        num_levels=num_levels,
        scale=scale,
        palette=palette,
        characters=characters,
    )


def make_grid(config: AppConfig) -> Optional[Grid]:
    try:
        if config.input_is_hex:
            data = parse_hex_fingerprint(config.text)
        else:
            data = digest(config.text, config.algorithm)
        return generate(
            data,
            num_levels=config.num_levels,
            width=config.width,
            height=config.height,
        )
    except (InvalidDimensions, ValueError) as e:
        st.error(str(e))
        return None


def display_legend(config: AppConfig) -> None:
    colors = PALETTE_REGISTRY[config.palette]
    for level, color in enumerate(colors[: config.num_levels - 1]):
        char = config.characters[level] if level < len(config.characters) else "?"
        st.markdown(
            f"<span style='color:{hex_color(color)}'>&#9632;</span>"
            f" level {level} `{char}`",
            unsafe_allow_html=True,
        )


# --------- Main App ---------
set_default_config()
tab_view, tab_config, tab_grid = st.tabs(["Fingerprint", "Config", "Grid"])

with tab_config:
    st.session_state["config"] = get_config_from_widgets()

config: AppConfig = st.session_state["config"]
grid = make_grid(config)

with tab_view:
    if grid is not None:
        image_col, text_col, legend_col = st.columns([0.4, 0.4, 0.2])
        try:
            with image_col:
                st.image(
                    render_image(
                        grid, PALETTE_REGISTRY[config.palette], scale=config.scale
                    )
                )
            with text_col:
                st.code(
                    render_framed_text(
                        grid,
                        config.characters,
                        title=None if config.input_is_hex else config.algorithm.upper(),
                    ),
                    language=None,
                )
        except PaletteTooSmall as e:
            st.error(str(e))
        with legend_col:
            display_legend(config)

with tab_grid:
    if grid is not None:
        st.json(thaw(grid.description), expanded=1)
        st.dataframe(grid.to_array())
