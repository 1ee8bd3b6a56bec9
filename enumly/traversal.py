from typing import Any, Callable


class _Halt(BaseException):
    """ends one pass early. a BaseException so host code catching Exception lets it through"""

    def __init__(self, owner: 'Pass', value: Any):
        super().__init__()
        self.owner = owner
        self.value = value


class Pass:
    """
    one traversal of a source that the visitor may end early with stop().
    a halt is only caught by the pass that raised it, so a pass nested inside
    another operation's callback never ends the wrong traversal.
    """
    __slots__ = ('source',)

    def __init__(self, source):
        self.source = source

    def stop(self, value: Any = None) -> None:
        raise _Halt(self, value)

    def run(self, visit: Callable[..., Any], default: Any = None) -> Any:
        """drive source.each(visit); the stop() value, or default when it ran to the end"""
        try:
            self.source.each(visit)
        except _Halt as halt:
            if halt.owner is not self:
                raise
            return halt.value
        return default


def materialize(sequence: Any) -> list:
    """copy any enumerable or plain iterable into a new list"""
    from .enumerable import Enumerable
    if isinstance(sequence, Enumerable):
        return sequence.to_a()
    return list(sequence)
