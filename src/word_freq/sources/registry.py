"""Source registry.

Adding a new source:
1) implement a TextSource subclass in `word_freq.sources.*`
2) register it here under a new `kind` key (static) OR use register_source() (dynamic)
"""

from __future__ import annotations
from typing import Callable, Dict
from .base import SourceSpec, TextSource
from .local_file import LocalFileSource
from .stdin import StdinSource

STDIN_PATH = "-"

# Static registry (built-in sources)
_STATIC_REGISTRY: Dict[str, Callable[[SourceSpec], TextSource]] = {
    "local_file": lambda spec: LocalFileSource(spec),
    "stdin": lambda spec: StdinSource(spec),
}

# Dynamic registry (plugins/extensions)
_DYNAMIC_REGISTRY: Dict[str, Callable[[SourceSpec], TextSource]] = {}

def register_source(kind: str, factory: Callable[[SourceSpec], TextSource]) -> None:
    """Register a new source type dynamically.

    Example:
        from word_freq.sources.registry import register_source

        register_source("http", lambda spec: HTTPSource(spec))
    """
    if kind in _STATIC_REGISTRY:
        raise ValueError(f"Source kind '{kind}' is already registered statically. Use a different name.")
    _DYNAMIC_REGISTRY[kind] = factory

def unregister_source(kind: str) -> None:
    """Unregister a dynamically registered source."""
    if kind in _DYNAMIC_REGISTRY:
        del _DYNAMIC_REGISTRY[kind]

def list_sources() -> Dict[str, str]:
    """List all registered sources (static + dynamic)."""
    all_sources = {}
    for kind in _STATIC_REGISTRY:
        all_sources[kind] = "static"
    for kind in _DYNAMIC_REGISTRY:
        all_sources[kind] = "dynamic"
    return all_sources

def source_spec_for_path(path: str, encoding: str = "utf-8") -> SourceSpec:
    kind = "stdin" if path == STDIN_PATH else "local_file"
    return SourceSpec(path=path, kind=kind, encoding=encoding)

def make_source(spec: SourceSpec) -> TextSource:
    """Create a source instance from spec. Static kinds win over dynamic ones."""
    if spec.kind in _STATIC_REGISTRY:
        return _STATIC_REGISTRY[spec.kind](spec)
    if spec.kind in _DYNAMIC_REGISTRY:
        return _DYNAMIC_REGISTRY[spec.kind](spec)

    available = list(_STATIC_REGISTRY.keys()) + list(_DYNAMIC_REGISTRY.keys())
    raise ValueError(
        f"Unknown source kind: {spec.kind}. "
        f"Available: {available}. "
        f"Register dynamically with register_source()"
    )
