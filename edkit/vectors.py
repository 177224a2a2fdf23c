"""Building, transforming and printing fixed-size integer vectors."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, MutableSequence


def sparse_vector(
    size: int,
    initial: Iterable[int] = (),
    assignments: Mapping[int, int] | None = None,
) -> list[int]:
    """Build a vector from leading values, zero-fill the rest, then apply assignments."""
    if size < 0:
        raise ValueError("vector size must not be negative")
    values = list(initial)
    if len(values) > size:
        raise ValueError("too many initial values for the vector size")
    values.extend([0] * (size - len(values)))
    for index, value in (assignments or {}).items():
        if not 0 <= index < size:
            raise IndexError(f"index {index} out of range for size {size}")
        values[index] = value
    return values


def doubled_indices(size: int) -> list[int]:
    """Return a vector whose element ``i`` is ``2 * i``."""
    if size < 0:
        raise ValueError("vector size must not be negative")
    return [2 * i for i in range(size)]


def double_in_place(values: MutableSequence[int]) -> None:
    """Double every element of ``values`` in place."""
    values[:] = [value * 2 for value in values]


def format_vector(values: Iterable[int], name: str = "c") -> str:
    """Render a vector as lines of the form ``name[i] = value``."""
    return "\n".join(f"{name}[{i}] = {value}" for i, value in enumerate(values))