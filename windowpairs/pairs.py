from typing import Iterator

from .window_types import WindowConfig, IndexBounds, SizeBounds, WindowChildren, WindowPayload, InvalidConfiguration, is_integer, DEFAULT_INDEX_FROM, DEFAULT_SIZE_MIN

#=============================================================================#
# validation

def validate_config(config) -> WindowConfig:
    """Check a `WindowConfig` (or its nested mapping form) and fill in its defaults.
    Raises `InvalidConfiguration` on the first violated rule.

    :config: a WindowConfig, or a mapping {"index": {"from", "to"}, "size": {"min", "max"}}.
    :return: the normalized WindowConfig, with every field set."""
    config = WindowConfig.coerce(config)
    to = config.index.to
    if not is_integer(to):
        raise InvalidConfiguration("index.to must be an integer.")
    if to < 0:
        raise InvalidConfiguration("index.to cannot be less than 0.")

    from_ = config.index.from_
    if from_ is not None:
        if not is_integer(from_):
            raise InvalidConfiguration("index.from must be an integer.")
        if from_ < 0:
            raise InvalidConfiguration("index.from cannot be less than 0.")
    else:
        from_ = DEFAULT_INDEX_FROM

    index_range = abs(to - from_) + 1
    if index_range < 2:
        raise InvalidConfiguration("Range between index.from and index.to cannot be less than 1.")

    size_min = config.size.min
    if size_min is None:
        size_min = DEFAULT_SIZE_MIN
    elif not is_integer(size_min):
        raise InvalidConfiguration("Minimum size must be an integer.")
    size_max = config.size.max
    if size_max is None:
        size_max = index_range
    elif not is_integer(size_max):
        raise InvalidConfiguration("Maximum size must be an integer.")

    if size_min < 0:
        raise InvalidConfiguration("Minimum size cannot be less than 0.")
    if size_max < size_min:
        raise InvalidConfiguration("Maximum size cannot be less than minimum size.")
    if size_max > index_range:
        raise InvalidConfiguration(f"Maximum size ({size_max}) cannot be greater than range ({index_range}).")

    return WindowConfig(
        index = IndexBounds(to = int(to), from_ = int(from_)),
        size = SizeBounds(min = int(size_min), max = int(size_max)))

#=============================================================================#
# enumeration

def _children(
    left_index: int,
    right_index: int,
    direction: int,
    current_size: int,
    size_min: int,
) -> WindowChildren:
    # children follow from the size relative to `size.min`, so the first tier has none
    # and every referenced child belongs to an earlier tier.
    size_vs_min = current_size - size_min
    if size_vs_min == 0:
        return WindowChildren()
    left = (left_index, right_index - direction)
    right = (left_index + direction, right_index)
    if size_vs_min == 1:
        return WindowChildren(left = left, right = right)
    else:
        middle = (left_index + direction, right_index - direction)
        return WindowChildren(left = left, middle = middle, right = right)

def _generate_pairs(config: WindowConfig) -> Iterator[WindowPayload]:
    index_from = config.index.from_
    index_to = config.index.to
    size_min = config.size.min
    direction = config.direction()
    iterations = config.size.max - size_min + 1
    for iteration in range(iterations):
        current_size = size_min + iteration
        step = current_size * direction
        # the tier ends when the right endpoint would pass `index.to`.
        last = index_to - (direction * (current_size - 1))
        left_index = index_from
        while left_index != last:
            right_index = left_index + step
            yield WindowPayload(
                pair = (left_index, right_index),
                iteration = iteration,
                current_size = current_size,
                step = step,
                direction = direction,
                child = _children(left_index, right_index, direction, current_size, size_min),
                config = config)
            left_index += direction

def generate_pairs(config) -> Iterator[WindowPayload]:
    """Enumerates the windows of a traversal, smallest size first.

    Within a size tier, windows are produced from `index.from` toward `index.to`, so every
    child a payload references has already been produced.
    The configuration is validated immediately; the windows themselves are produced lazily.
    Each call returns a fresh iterator.

    :config: a WindowConfig or its nested mapping form.
    :return: an iterator of WindowPayload."""
    return _generate_pairs(validate_config(config))

def count_pairs(config) -> int:
    "The number of payloads `generate_pairs(config)` produces, computed without enumerating them."
    config = validate_config(config)
    index_range = config.range()
    return sum(max(index_range - size, 0) for size in range(config.size.min, config.size.max + 1))
