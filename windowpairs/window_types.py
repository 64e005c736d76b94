from collections.abc import Mapping
from dataclasses import dataclass, field
from numbers import Integral
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")

Pair = tuple[int, int]

#=============================================================================#

DEFAULT_INDEX_FROM = 0
DEFAULT_SIZE_MIN = 0

class InvalidConfiguration(ValueError):
    """Raised when a window configuration cannot be traversed."""

def is_integer(value) -> bool:
    "True for ints and numpy integers; bools are rejected."
    return isinstance(value, Integral) and not isinstance(value, bool)

#=============================================================================#
# configuration

@dataclass(frozen = True)
class IndexBounds:
    to: int
    from_: Optional[int] = None

@dataclass(frozen = True)
class SizeBounds:
    min: Optional[int] = None
    max: Optional[int] = None

@dataclass(frozen = True)
class WindowConfig:
    """Traversal from `index.from_` to `index.to`, enumerating window sizes `size.min` through `size.max`.
    Absent values are filled in by `windowpairs.pairs.validate_config`."""
    index: IndexBounds
    size: SizeBounds = field(default_factory = SizeBounds)

    @classmethod
    def from_dict(cls, mapping: Mapping) -> "WindowConfig":
        """Build a config from the nested mapping form:

            {"index": {"from": 0, "to": 4}, "size": {"min": 1, "max": 4}}"""
        index = mapping.get("index") or {}
        size = mapping.get("size") or {}
        if not isinstance(index, Mapping):
            raise InvalidConfiguration("index.to must be an integer.")
        if not isinstance(size, Mapping):
            raise InvalidConfiguration("size must be a mapping of min and max.")
        return cls(
            index = IndexBounds(
                to = index.get("to"),
                from_ = index.get("from")),
            size = SizeBounds(
                min = size.get("min"),
                max = size.get("max")))

    @classmethod
    def coerce(cls, config) -> "WindowConfig":
        if isinstance(config, cls):
            return config
        elif isinstance(config, Mapping):
            return cls.from_dict(config)
        else:
            raise InvalidConfiguration(f"expected a WindowConfig or a mapping, not {type(config).__name__}.")

    def as_dict(self) -> dict[str, dict[str, int]]:
        index = {"from": self.index.from_, "to": self.index.to}
        size = {"min": self.size.min, "max": self.size.max}
        return {
            "size": {k: v for (k, v) in size.items() if v is not None},
            "index": {k: v for (k, v) in index.items() if v is not None},
        }

    def range(self) -> int:
        "Count of distinct positions between the endpoints."
        return abs(self.index.to - (self.index.from_ or 0)) + 1

    def direction(self) -> int:
        return 1 if (self.index.from_ or 0) < self.index.to else -1

#=============================================================================#
# window descriptors

@dataclass(frozen = True)
class WindowChildren:
    """Coordinates of the windows nested one (left, right) or two (middle) positions inside a window.
    Absent children are None."""
    left: Optional[Pair] = None
    middle: Optional[Pair] = None
    right: Optional[Pair] = None

    def __iter__(self):
        return iter((self.left, self.middle, self.right))

    def present(self) -> list[Pair]:
        return [c for c in self if c is not None]

@dataclass(frozen = True)
class ResolvedChildren(Generic[T]):
    left: Optional[T] = None
    middle: Optional[T] = None
    right: Optional[T] = None

@dataclass(frozen = True)
class WindowPayload:
    pair: Pair
    iteration: int
    current_size: int
    step: int
    direction: int
    child: WindowChildren
    config: WindowConfig

    def __repr__(self):
        return f"WindowPayload(pair = {self.pair}, iteration = {self.iteration}, current_size = {self.current_size}, step = {self.step}, direction = {self.direction}, child = ({self.child.left}, {self.child.middle}, {self.child.right}))"

def describe(payload: WindowPayload) -> dict[str, Any]:
    "Plain-data form of a payload, in the layout of `WindowConfig.as_dict`."
    return {
        "pair": list(payload.pair),
        "iteration": payload.iteration,
        "current_size": payload.current_size,
        "step": payload.step,
        "direction": payload.direction,
        "child": {
            "left": list(payload.child.left) if payload.child.left else None,
            "middle": list(payload.child.middle) if payload.child.middle else None,
            "right": list(payload.child.right) if payload.child.right else None,
        },
        "config": payload.config.as_dict(),
    }
