"""Fatal error types raised while generating the stub file.

Every error aborts the whole run; nothing is written on failure.
"""

from __future__ import annotations

from typing import Any


class ApiDocsError(Exception):
    """Base error for stub generation."""

    pass


class SchemaError(ApiDocsError):
    """The API document does not match the supported schema."""

    pass


class UnknownFormatError(SchemaError):
    """Application or stage identity is not the supported one."""

    def __init__(self, application: Any, stage: Any) -> None:
        super().__init__(
            f"Unknown JSON format: application={application!r}, stage={stage!r}"
        )
        self.application = application
        self.stage = stage


class UnsupportedVersionError(SchemaError):
    """The api_version field is not the supported value."""

    def __init__(self, version: Any) -> None:
        super().__init__(f"Unsupported JSON version {version!r}")
        self.version = version


class UnknownOperatorError(SchemaError):
    """A class declares an operator outside index/length/call."""

    def __init__(self, class_name: str, operator: str) -> None:
        super().__init__(f"Unknown operator {operator!r} on class {class_name}")
        self.class_name = class_name
        self.operator = operator


class UnknownConceptCategoryError(SchemaError):
    """A concept has a category the generator does not know."""

    def __init__(self, concept_name: str, category: Any) -> None:
        super().__init__(
            f"Unknown concept category {category!r} for concept {concept_name}"
        )
        self.concept_name = concept_name
        self.category = category


class UnknownComplexTypeError(SchemaError):
    """A type expression has an unrecognized complex_type tag."""

    def __init__(self, complex_type: Any) -> None:
        super().__init__(f"Unknown complex type {complex_type!r}")
        self.complex_type = complex_type


class ComplexGlobalTypeError(SchemaError):
    """A global object's type is not a plain named type."""

    def __init__(self, global_name: str) -> None:
        super().__init__(f"Global object {global_name} has a complex type")
        self.global_name = global_name


class UnresolvedReferenceError(ApiDocsError):
    """A cross-reference matches no builtin, class, event, define or concept."""

    def __init__(self, reference: str) -> None:
        super().__init__(f"Unresolved reference: {reference}")
        self.reference = reference
