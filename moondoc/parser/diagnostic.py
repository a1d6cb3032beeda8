"""Located error messages and batches of them.

Diagnostics are the only error representation of the tag pipeline: every
failure is anchored at the span of the text that caused it, and failures are
reported together rather than one at a time.
"""

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, overload

from ..utils.errors import ValidationError

if TYPE_CHECKING:
    from .span import Span


@dataclass(frozen=True)
class Diagnostic:
    """A message anchored at a span of source text."""

    span: "Span"
    message: str

    @property
    def path(self) -> str:
        return self.span.path

    @property
    def line(self) -> int:
        return self.span.line

    @property
    def column(self) -> int:
        return self.span.column

    def format(self) -> str:
        return f"{self.path}:{self.line}:{self.column}: {self.message}"


class Diagnostics(Sequence[Diagnostic]):
    """Ordered, non-empty batch of diagnostics."""

    def __init__(self, diagnostics: Iterable[Diagnostic]):
        self._diagnostics = list(diagnostics)
        if not self._diagnostics:
            raise ValidationError(
                "Diagnostics cannot be empty",
                recovery_hint="Use Diagnostics.collect() when there may be none",
            )

    @classmethod
    def collect(cls, diagnostics: Iterable[Diagnostic]) -> "Diagnostics | None":
        """Build a batch, or return ``None`` when there is nothing to report."""
        items = list(diagnostics)
        return cls(items) if items else None

    @classmethod
    def merge(cls, *batches: "Diagnostics | None") -> "Diagnostics | None":
        """Concatenate batches in order, skipping absent ones."""
        return cls.collect(d for batch in batches if batch for d in batch)

    @overload
    def __getitem__(self, index: int) -> Diagnostic: ...

    @overload
    def __getitem__(self, index: slice) -> list[Diagnostic]: ...

    def __getitem__(self, index):
        return self._diagnostics[index]

    def __len__(self) -> int:
        return len(self._diagnostics)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self._diagnostics)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Diagnostics):
            return self._diagnostics == other._diagnostics
        return NotImplemented

    def __repr__(self) -> str:
        return f"Diagnostics({self._diagnostics!r})"

    def sorted(self) -> "Diagnostics":
        """Copy ordered by position within each buffer.

        Diagnostics from different buffers keep their relative order.
        """
        buffers: list = []
        for diagnostic in self._diagnostics:
            if not any(diagnostic.span.buffer is b for b in buffers):
                buffers.append(diagnostic.span.buffer)

        def key(diagnostic: Diagnostic) -> tuple[int, int, int]:
            index = next(
                i for i, b in enumerate(buffers) if b is diagnostic.span.buffer
            )
            return index, diagnostic.span.start, diagnostic.span.end

        return Diagnostics(sorted(self._diagnostics, key=key))

    def messages(self) -> list[str]:
        return [d.message for d in self._diagnostics]

    def format(self) -> str:
        return "\n".join(d.format() for d in self._diagnostics)
