"""Annotation values and lookups over annotation parsing results."""

from rbs_inline.annotations.lookup import (
    attribute_type,
    comment_text,
    first_application,
    first_assertion,
    method_type_assertions,
    passthrough_contents,
    return_type,
    var_type_map,
)
from rbs_inline.annotations.models import (
    AnnotationValue,
    Application,
    Assertion,
    ParsingResult,
    RBSAnnotation,
    ReturnType,
    VarType,
)

__all__ = [
    "AnnotationValue",
    "Application",
    "Assertion",
    "ParsingResult",
    "RBSAnnotation",
    "ReturnType",
    "VarType",
    "attribute_type",
    "comment_text",
    "first_application",
    "first_assertion",
    "method_type_assertions",
    "passthrough_contents",
    "return_type",
    "var_type_map",
]
