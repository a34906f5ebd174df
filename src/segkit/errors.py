## diagnostics and error outcomes for segkit
## Copyright (c) 2026 segkit contributors

# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
#
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""
Diagnostics and error outcomes.

Every validation failure in segkit is described by a ``Diagnostic``
carrying an error code and a human-readable message.  The failure is
raised as a ``SegmentError`` subclass holding that diagnostic, and, when
the caller passes a ``DiagnosticSink``, the diagnostic is recorded there
first.

Error codes:
- S001: non-planar input
- S002: degenerate geometry
- S003: radius mismatch
- S004: empty segment
- S005: degenerate extrusion
- S006: null model
- S007: surface construction failed
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Optional


class ErrorCode(Enum):
    NON_PLANAR_INPUT = "S001"
    DEGENERATE_GEOMETRY = "S002"
    RADIUS_MISMATCH = "S003"
    EMPTY_SEGMENT = "S004"
    DEGENERATE_EXTRUSION = "S005"
    NULL_MODEL = "S006"
    SURFACE_CONSTRUCTION_FAILED = "S007"


class Severity(Enum):
    """Severity levels for diagnostics."""
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


@dataclass
class Diagnostic:
    """A single diagnostic message."""
    code: ErrorCode
    message: str
    severity: Severity = Severity.ERROR
    hints: List[str] = field(default_factory=list)

    def format(self) -> str:
        """Format the diagnostic for display."""
        parts = [f"{self.severity.value}[{self.code.value}]: {self.message}"]
        for hint in self.hints:
            parts.append(f"    = hint: {hint}")
        return "\n".join(parts)

    def to_json(self) -> dict:
        return {
            "code": self.code.value,
            "name": self.code.name,
            "message": self.message,
            "severity": self.severity.value,
            "hints": list(self.hints),
        }


class DiagnosticSink:
    """Ordered collector for diagnostics reported by segkit operations."""

    def __init__(self):
        self._items: List[Diagnostic] = []

    def report(self, diagnostic: Diagnostic) -> Diagnostic:
        self._items.append(diagnostic)
        return diagnostic

    @property
    def errors(self) -> List[Diagnostic]:
        return [d for d in self._items if d.severity == Severity.ERROR]

    @property
    def warnings(self) -> List[Diagnostic]:
        return [d for d in self._items if d.severity == Severity.WARNING]

    def codes(self) -> List[ErrorCode]:
        return [d.code for d in self._items]

    def clear(self) -> None:
        self._items.clear()

    def format(self) -> str:
        return "\n".join(d.format() for d in self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self._items)


class SegmentError(ValueError):
    """Base exception for segkit failures."""

    def __init__(self, diagnostic: Diagnostic):
        self.diagnostic = diagnostic
        super().__init__(diagnostic.message)

    @property
    def code(self) -> ErrorCode:
        return self.diagnostic.code

    def __str__(self) -> str:
        return self.diagnostic.format()


class NonPlanarInputError(SegmentError):
    """A defining point has a non-zero z coordinate (S001)."""
    pass


class DegenerateGeometryError(SegmentError):
    """Coincident points or another shape that defines nothing (S002)."""
    pass


class RadiusMismatchError(SegmentError):
    """Arc endpoints are at different distances from the center (S003)."""
    pass


class EmptySegmentError(SegmentError):
    """An operand carries no segment data (S004)."""
    pass


class DegenerateExtrusionError(SegmentError):
    """Extrusion height is below tolerance (S005)."""
    pass


class NullModelError(SegmentError):
    """The model handle is missing or not a model (S006)."""
    pass


class SurfaceConstructionError(SegmentError):
    """A surface builder could not produce its patch (S007)."""
    pass


_ERROR_CLASSES = {
    ErrorCode.NON_PLANAR_INPUT: NonPlanarInputError,
    ErrorCode.DEGENERATE_GEOMETRY: DegenerateGeometryError,
    ErrorCode.RADIUS_MISMATCH: RadiusMismatchError,
    ErrorCode.EMPTY_SEGMENT: EmptySegmentError,
    ErrorCode.DEGENERATE_EXTRUSION: DegenerateExtrusionError,
    ErrorCode.NULL_MODEL: NullModelError,
    ErrorCode.SURFACE_CONSTRUCTION_FAILED: SurfaceConstructionError,
}


def fail(code: ErrorCode, message: str, sink: Optional[DiagnosticSink] = None,
         hints: Optional[List[str]] = None) -> SegmentError:
    """Build the error for ``code``, recording it to ``sink`` if given.

    The error is returned, not raised, so call sites read
    ``raise fail(...)``.
    """
    diag = Diagnostic(code=code, message=message, hints=list(hints or []))
    if sink is not None:
        sink.report(diag)
    return _ERROR_CLASSES[code](diag)


# --- error factories ---

def error_non_planar(what: str, sink=None) -> SegmentError:
    """S001: non-zero z in a defining point."""
    return fail(ErrorCode.NON_PLANAR_INPUT,
                f"non-0 z values in {what} points",
                sink,
                ["segment geometry must lie in the z=0 plane"])


def error_degenerate(what: str, sink=None) -> SegmentError:
    """S002: degenerate geometry."""
    return fail(ErrorCode.DEGENERATE_GEOMETRY, f"degenerate {what}", sink)


def error_radius_mismatch(r1: float, r2: float, tol: float, sink=None) -> SegmentError:
    """S003: start and end radii of an arc disagree."""
    return fail(ErrorCode.RADIUS_MISMATCH,
                f"radii differ by > {tol:g} ({r1:g} vs {r2:g})",
                sink)


def error_empty_segment(which: str = "segment", sink=None) -> SegmentError:
    """S004: operand is not a segment."""
    return fail(ErrorCode.EMPTY_SEGMENT, f"no data in {which}", sink)


def error_degenerate_extrusion(z_top: float, z_bottom: float, sink=None) -> SegmentError:
    """S005: extrusion range too small."""
    return fail(ErrorCode.DEGENERATE_EXTRUSION,
                f"degenerate surface: top z {z_top:g} and bottom z {z_bottom:g} coincide",
                sink)


def error_null_model(sink=None) -> SegmentError:
    """S006: no usable model handle."""
    return fail(ErrorCode.NULL_MODEL, "invalid model handle passed for surface instantiation", sink)


def error_surface_construction(what: str, sink=None) -> SegmentError:
    """S007: builder failure."""
    return fail(ErrorCode.SURFACE_CONSTRUCTION_FAILED,
                f"could not create {what} surface",
                sink)


__all__ = [
    'ErrorCode',
    'Severity',
    'Diagnostic',
    'DiagnosticSink',
    'SegmentError',
    'NonPlanarInputError',
    'DegenerateGeometryError',
    'RadiusMismatchError',
    'EmptySegmentError',
    'DegenerateExtrusionError',
    'NullModelError',
    'SurfaceConstructionError',
    'fail',
    'error_non_planar',
    'error_degenerate',
    'error_radius_mismatch',
    'error_empty_segment',
    'error_degenerate_extrusion',
    'error_null_model',
    'error_surface_construction',
]
