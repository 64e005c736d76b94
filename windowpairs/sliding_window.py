import logging
from typing import Callable, TypeVar

from .memo import WindowMemo
from .pairs import _generate_pairs, validate_config
from .window_types import ResolvedChildren, WindowPayload

T = TypeVar("T")

WindowHandler = Callable[[WindowPayload, WindowMemo[T], ResolvedChildren[T]], T]

logger = logging.getLogger(__name__)

def _resolve(memo: WindowMemo[T], payload: WindowPayload) -> ResolvedChildren[T]:
    # no fallback: a child missing from the memo raises KeyError.
    left, middle, right = payload.child
    return ResolvedChildren(
        left = memo[left] if left is not None else None,
        middle = memo[middle] if middle is not None else None,
        right = memo[right] if right is not None else None)

def sliding_window(
    handler: WindowHandler,
    config,
) -> WindowMemo[T]:
    """Evaluates `handler` over every window of the traversal, smallest windows first.

    The handler is called as `handler(payload, memo, children)`:
    :payload: the WindowPayload of the current window.
    :memo: the WindowMemo of every result so far.
    :children: ResolvedChildren holding the memoized results of the payload's child windows.
    Its return value is stored at `memo[payload.pair]`.

    Children are looked up directly; a child missing from the memo raises KeyError.

    :config: a WindowConfig or its nested mapping form.
    :return: the completed WindowMemo."""
    config = validate_config(config)
    logger.debug("evaluating windows over %s", config)
    memo = WindowMemo()
    for payload in _generate_pairs(config):
        children = _resolve(memo, payload)
        memo[payload.pair] = handler(payload, memo, children)
    logger.debug("evaluated %d windows", len(memo))
    return memo
