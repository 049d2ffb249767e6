# main.py

"""Streamlit web UI for the input mask engine.

Provides a masked text field: the value typed is reformatted according to
the template and the raw value a form would receive is shown alongside.
"""

import streamlit as st
import logging

from inputmask.core.loader import TokenLoader
from inputmask.engine.mask_engine import MaskEngine
from inputmask.logging_config import configure_logging
from inputmask.service.adapter import MaskedField
from inputmask.service.config import settings

configure_logging(settings.log_level, settings.log_format)

logger = logging.getLogger(__name__)


def main():
    """Run the Streamlit application UI.

    The template and the field value are both editable. Each rerun pushes
    the typed value through a MaskedField and displays its masked and raw
    forms.
    """
    st.set_page_config(layout="wide", page_title="Input Mask", page_icon="🔤")

    st.title("Input Mask")
    st.markdown("Format field input against a token template.")
    st.markdown("---")

    col1, col2 = st.columns(2)

    with col1:
        st.subheader("Field")
        template = st.text_input(
            "Mask template", value=settings.default_template or "NNN-LLLL"
        )
        typed = st.text_input("Value", placeholder="Type or paste a value...")

    with col2:
        st.subheader("Result")

        try:
            field = MaskedField(MaskEngine(template))
            raw_values = []
            field.register_on_change(raw_values.append)
            field.write(typed)

            st.text_input("Displayed value", value=field.displayed, disabled=True)
            st.text_input("Raw value", value=raw_values[-1], disabled=True)
            st.caption(f"Raw capacity: {field.engine.raw_capacity}")

        except Exception:
            st.error("An unexpected error occurred while masking.")
            logger.error(
                "Unexpected error in main application loop",
                exc_info=True,
                extra={"template": template},
            )

    with st.sidebar:
        st.header("Tokens")
        loader = TokenLoader.get_instance()
        for token in loader.get_patterns():
            st.markdown(f"- `{token}`: {loader.get_description(token)}")

        st.markdown("Any other template character is a literal.")


if __name__ == "__main__":
    main()
