"""Sign-up form used by the demo app and as a reference schema."""

from typing import Any, Dict

from form_compiler.rules import (
    PHONE_NUMBER,
    conditional_format,
    password_match,
    password_strength,
)
from form_compiler.schemas import BooleanNode, ChoiceNode, FormSchema, TextNode

SIGNUP_DEFAULTS: Dict[str, Any] = {
    "name": "Robin Lebhar",
    "email": "robin@lebhar.com",
    "country": "fr",
    "gender": "male",
    "notifications": False,
    "password": "123456",
    "repeatPassword": "123456",
    "address": "123 Main St, Anytown, USA",
    "terms": False,
    "phoneNumber": "",
}


def build_signup_schema() -> FormSchema:
    """Eleven fields, three of them conditional, plus password and phone rules."""
    return FormSchema(
        fields={
            "name": TextNode(min_length=2, messages={"min_length": "error.name.min"}),
            "email": TextNode(format="email", messages={"email": "error.email.invalid"}),
            "country": ChoiceNode(options=["us", "ca", "uk", "fr", "de"]),
            "gender": ChoiceNode(options=["male", "female", "other", "prefer-not-to-say"]),
            "notifications": BooleanNode(),
            "password": TextNode(min_length=6, messages={"min_length": "error.password.min"}),
            "repeatPassword": TextNode(min_length=6, messages={"min_length": "error.password.min"}),
            "newsletter": BooleanNode(
                meta={"showConditions": [{"field": "notifications", "operator": "equals", "value": True}]}
            ).optional(),
            "phoneNumber": TextNode(
                meta={"showConditions": [{"field": "country", "operator": "equals", "value": "us"}]}
            ).optional(),
            "address": TextNode(
                meta={"showConditions": [{"field": "country", "operator": "notEquals", "value": "us"}]}
            ).optional(),
            "terms": BooleanNode(must_be_true=True, messages={"must_be_true": "error.terms.required"}),
        },
        rules=[
            password_strength("password", "repeatPassword"),
            password_match("password", "repeatPassword"),
            conditional_format("country", "us", "phoneNumber", PHONE_NUMBER),
        ],
    )
