"""Tests for the exception hierarchy."""

import pickle

import pytest

from curvestrip.exceptions import (
    ERRORS_BY_KIND,
    CurvestripError,
    DegenerateSpacingError,
    DocumentError,
    ErrorKind,
    RenderError,
    TessellationError,
)


class TestTessellationError:
    """Tests for TessellationError and its subclasses."""

    def test_every_kind_has_a_class(self) -> None:
        """Test the kind lookup covers every ErrorKind."""
        assert set(ERRORS_BY_KIND) == set(ErrorKind)
        for kind, cls in ERRORS_BY_KIND.items():
            assert issubclass(cls, TessellationError)
            assert cls.kind is kind

    def test_message_without_index(self) -> None:
        """Test the message is the bare reason."""
        error = DegenerateSpacingError("points coincide")
        assert str(error) == "points coincide"
        assert error.curve_index is None

    def test_with_curve_index(self) -> None:
        """Test attaching a curve index keeps class and reason."""
        error = DegenerateSpacingError("points coincide").with_curve_index(4)
        assert isinstance(error, DegenerateSpacingError)
        assert error.reason == "points coincide"
        assert error.curve_index == 4
        assert str(error) == "Curve 4: points coincide"

    @pytest.mark.parametrize("cls", list(ERRORS_BY_KIND.values()))
    def test_pickle_round_trip(self, cls: type[TessellationError]) -> None:
        """Test errors survive pickling with reason and index intact."""
        restored = pickle.loads(pickle.dumps(cls("bad", 2)))
        assert type(restored) is cls
        assert restored.reason == "bad"
        assert restored.curve_index == 2


class TestOtherErrors:
    """Tests for document and render errors."""

    def test_document_error(self) -> None:
        """Test DocumentError message and base class."""
        error = DocumentError("missing canvas")
        assert isinstance(error, CurvestripError)
        assert "missing canvas" in str(error)

    def test_render_error(self) -> None:
        """Test RenderError message and base class."""
        error = RenderError("bad color")
        assert isinstance(error, CurvestripError)
        assert error.reason == "bad color"
