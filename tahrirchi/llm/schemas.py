"""Response schemas passed to Gemini for schema-constrained decoding."""

from __future__ import annotations

from google.genai import types

from tahrirchi.models import Operation

GRAMMAR_ERROR_FIELDS = ("offset", "length", "original", "suggestion", "explanation")

GRAMMAR_SCHEMA = types.Schema(
    type=types.Type.OBJECT,
    properties={
        "correctedText": types.Schema(type=types.Type.STRING),
        "errors": types.Schema(
            type=types.Type.ARRAY,
            items=types.Schema(
                type=types.Type.OBJECT,
                properties={
                    "offset": types.Schema(type=types.Type.INTEGER),
                    "length": types.Schema(type=types.Type.INTEGER),
                    "original": types.Schema(type=types.Type.STRING),
                    "suggestion": types.Schema(type=types.Type.STRING),
                    "explanation": types.Schema(type=types.Type.STRING),
                },
                required=list(GRAMMAR_ERROR_FIELDS),
                property_ordering=list(GRAMMAR_ERROR_FIELDS),
            ),
        ),
    },
    required=["correctedText", "errors"],
    property_ordering=["correctedText", "errors"],
)

SIMPLIFY_SCHEMA = types.Schema(
    type=types.Type.OBJECT,
    properties={
        "simplifiedText": types.Schema(type=types.Type.STRING),
        "summary": types.Schema(type=types.Type.STRING),
    },
    required=["simplifiedText", "summary"],
    property_ordering=["simplifiedText", "summary"],
)

_SCHEMAS = {
    Operation.GRAMMAR: GRAMMAR_SCHEMA,
    Operation.SIMPLIFY: SIMPLIFY_SCHEMA,
}


def schema_for(operation: Operation) -> types.Schema:
    return _SCHEMAS[Operation(operation)]
