# daftlog/domain.py
from dataclasses import dataclass
from typing import Any, Tuple


@dataclass(frozen=True)
class RendererSpec:
    """
    One entry of the error renderer chain: a registered renderer kind and the
    positional arguments its constructor receives.
    """
    kind: str
    args: Tuple[Any, ...] = ()

    @property
    def display(self) -> str:
        return f"{self.kind}({', '.join(repr(a) for a in self.args)})"


@dataclass(frozen=True)
class HandlerConfig:
    """
    Validated error handling settings of a CatchingHttpHandler.
    Built once by config.load_handler_config and never mutated.
    """
    renderers: Tuple[RendererSpec, ...]

    @property
    def kinds(self) -> Tuple[str, ...]:
        return tuple(spec.kind for spec in self.renderers)
