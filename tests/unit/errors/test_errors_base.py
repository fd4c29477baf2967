import pytest

from specforge.errors import (
    INTERNAL_ERROR,
    ErrorCategory,
    ErrorCode,
    ErrorSeverity,
    SpecforgeError,
)
from specforge.errors.registry import registry
from specforge.extraction.errors import (
    EXTRACTION,
    EXTRACTION_IMPOSSIBLE,
    ExtractionError,
    ExtractionImpossibleError,
)
from specforge.schema.errors import DOCUMENT_INVALID, SCHEMA, DocumentValidationError

FAKE = ErrorCategory.get_or_create("FAKE")
FAKE_ERROR = ErrorCode.get_or_create("FAKE_ERROR", FAKE)


# --- Fake error subclass for testing ---
class FakeError(SpecforgeError):
    def __init__(self, message: str, context: dict[str, object] | None = None, **kwargs):
        super().__init__(message, code=FAKE_ERROR, context=context, **kwargs)


class _Extractor:
    pass


class _Source:
    pass


# --- Tests ---
def test_base_error_cannot_be_instantiated():
    with pytest.raises(TypeError):
        SpecforgeError("msg", INTERNAL_ERROR)


def test_error_subclass_instantiation():
    err = FakeError("something went wrong", {"a": 1}, b=2)
    assert err.code == FAKE_ERROR
    assert err.category == FAKE
    assert err.severity == ErrorSeverity.ERROR
    assert err.context == {"a": 1, "b": 2}
    assert err.timestamp is not None
    assert str(err) == "FAKE_ERROR: something went wrong"


def test_code_must_be_error_code():
    class StringCodeError(SpecforgeError):
        pass

    with pytest.raises(TypeError):
        StringCodeError("msg", code="FAKE_ERROR")


def test_add_context_chains():
    err = FakeError("fail")
    assert err.add_context("key", "value") is err
    assert err.context["key"] == "value"


def test_to_dict():
    data = FakeError("fail", {"a": 1}).to_dict()
    assert data["code"] == "FAKE_ERROR"
    assert data["category"] == "FAKE"
    assert data["severity"] == "error"
    assert data["context"] == {"a": 1}
    assert "timestamp" in data


def test_registry_returns_same_instances():
    assert ErrorCategory.get_or_create("FAKE") is FAKE
    assert ErrorCode.get_or_create("FAKE_ERROR", FAKE) is FAKE_ERROR
    assert ErrorCode.get_by_code("FAKE_ERROR") is FAKE_ERROR
    assert ErrorCode.get_by_code("NO_SUCH_CODE", raise_if_missing=False) is None
    with pytest.raises(ValueError):
        ErrorCode.get_by_code("NO_SUCH_CODE")
    assert FAKE in registry.get_all_categories()


def test_subcategories():
    child = ErrorCategory.get_or_create("FAKE_CHILD", parent=FAKE)
    child_code = ErrorCode.get_or_create("FAKE_CHILD_ERROR", child)

    assert child.is_subcategory_of(FAKE)
    assert not FAKE.is_subcategory_of(child)
    assert child_code in ErrorCode.filter_by_category(FAKE)


def test_extraction_impossible_error_describes_pair():
    err = ExtractionImpossibleError(_Extractor(), _Source, object(), reason="no metadata")

    assert isinstance(err, ExtractionError)
    assert err.code == EXTRACTION_IMPOSSIBLE
    assert err.category == EXTRACTION
    assert err.context["extractor"] == "_Extractor"
    assert err.context["source"].endswith("._Source")
    assert err.context["target"] == "object"
    assert err.message.startswith("_Extractor cannot extract")
    assert err.message.endswith(": no metadata")


def test_document_validation_error_lists_violations():
    err = DocumentValidationError(["info: must not be null", "paths: must not be null"])

    assert err.code == DOCUMENT_INVALID
    assert err.category == SCHEMA
    assert err.violations == ["info: must not be null", "paths: must not be null"]
    assert err.context["violation_count"] == 2
    assert "  - info: must not be null" in err.message
