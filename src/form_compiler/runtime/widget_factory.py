"""
Widget Factory - maps compiled field descriptors to Streamlit widgets.

Type Mappings:
- text            -> st.text_input() (type="password" for secret fields)
- number          -> st.number_input()
- boolean         -> st.toggle()
- choice (<= N)   -> st.radio()
- choice (> N)    -> st.selectbox()

The descriptor never carries the widget choice; the radio/select threshold
is a presentation setting (FormConfig.radio_threshold).
"""

from typing import Any, Callable, Dict, Optional

import streamlit as st

from form_compiler.runtime.form_session import FormSession
from form_compiler.schemas.descriptor import FieldDescriptor, FieldKind

DEFAULT_RADIO_THRESHOLD = 3


class WidgetFactory:
    """Factory for creating Streamlit widgets from field descriptors."""

    @staticmethod
    def widget_kind(descriptor: FieldDescriptor, radio_threshold: int = DEFAULT_RADIO_THRESHOLD) -> str:
        """
        Pick the widget variant for a descriptor.

        Returns:
            One of "text_input", "password_input", "number_input", "toggle",
            "radio", "select"
        """
        if descriptor.kind is FieldKind.BOOLEAN:
            return "toggle"
        if descriptor.kind is FieldKind.NUMBER:
            return "number_input"
        if descriptor.kind is FieldKind.CHOICE:
            if len(descriptor.options or ()) <= radio_threshold:
                return "radio"
            return "select"
        return "password_input" if descriptor.secret else "text_input"

    @staticmethod
    def create_widget(
        descriptor: FieldDescriptor,
        value: Any,
        error: Optional[str],
        translate: Callable[..., str],
        session_state_key: str,
        radio_threshold: int = DEFAULT_RADIO_THRESHOLD,
    ) -> Any:
        """
        Draw one field and return the value the user left in it.

        Args:
            descriptor: Compiled field descriptor
            value: Current value held by the form session
            error: Localized error text, or None
            translate: Active translator (for the select placeholder)
            session_state_key: Key for storing the widget state in st.session_state
            radio_threshold: Max option count rendered as a radio group

        Returns:
            Widget value
        """
        kind = WidgetFactory.widget_kind(descriptor, radio_threshold)
        label = f"{descriptor.label} *" if descriptor.required else descriptor.label
        help_text = descriptor.description

        if kind == "toggle":
            result = st.toggle(label, value=bool(value), key=session_state_key, help=help_text)

        elif kind == "number_input":
            result = st.number_input(
                label,
                value=value if isinstance(value, (int, float)) and not isinstance(value, bool) else None,
                placeholder=descriptor.placeholder,
                key=session_state_key,
                help=help_text,
            )

        elif kind in ("radio", "select"):
            options = descriptor.options or ()
            labels = {option.value: option.label for option in options}
            raw_values = [option.value for option in options]
            index = raw_values.index(value) if value in raw_values else None

            if kind == "radio":
                result = st.radio(
                    label,
                    options=raw_values,
                    index=index,
                    format_func=lambda v: labels.get(v, str(v)),
                    key=session_state_key,
                    help=help_text,
                )
            else:
                result = st.selectbox(
                    label,
                    options=raw_values,
                    index=index,
                    format_func=lambda v: labels.get(v, str(v)),
                    placeholder=translate(
                        "form.select.placeholder", values={"fieldName": descriptor.label.lower()}
                    ),
                    key=session_state_key,
                    help=help_text,
                )

        else:
            result = st.text_input(
                label,
                value=value if isinstance(value, str) else "",
                placeholder=descriptor.placeholder,
                type="password" if kind == "password_input" else "default",
                key=session_state_key,
                help=help_text,
            )

        if error:
            st.caption(f":red[{error}]")
        return result


def render_form(
    session: FormSession,
    translate: Callable[..., str],
    key_prefix: str = "form",
    radio_threshold: int = DEFAULT_RADIO_THRESHOLD,
) -> Dict[str, Any]:
    """
    Render every visible field of a session.

    Returns:
        Field name -> new value, for the fields the user changed this run
    """
    values = session.values
    errors = session.errors
    changes: Dict[str, Any] = {}

    for descriptor in session.visible_descriptors():
        current = values.get(descriptor.name)
        new_value = WidgetFactory.create_widget(
            descriptor,
            current,
            errors.get(descriptor.name),
            translate,
            session_state_key=f"{key_prefix}_{descriptor.name}",
            radio_threshold=radio_threshold,
        )
        if new_value != current and not (new_value == "" and current is None):
            changes[descriptor.name] = new_value

    return changes
