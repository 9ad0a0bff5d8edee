from typing import Awaitable, Callable, Iterable, TypeVar

T = TypeVar("T")

Hook = Callable[[T], Awaitable[T]]


async def run_hooks(initial: T, hooks: Iterable[Hook[T]]) -> T:
    """Run hooks over a value, one after another.

    Each hook receives the awaited result of the previous one. The first hook
    to raise aborts the pipeline and its exception propagates unchanged.

    Args:
        initial: Value handed to the first hook.
        hooks: Hooks in the order they should run.

    Returns:
        The value produced by the last hook, or ``initial`` if there are none.
    """
    value = initial
    for hook in hooks:
        value = await hook(value)
    return value
