"""Example: adding a new source kind without modifying registry.py.

Registers an in-memory source and counts its text through the normal
pipeline.
"""

from word_freq.pipeline.count import count_source
from word_freq.sources.base import SourceSpec, TextSource
from word_freq.sources.registry import list_sources, make_source, register_source
from word_freq.writers.registry import get_writer

_SNIPPETS = {
    "greeting": "hello world hello",
    "pangram": "the quick brown fox jumps over the lazy dog",
}

class SnippetSource(TextSource):
    """Serves a named snippet instead of a file."""

    def __init__(self, spec: SourceSpec):
        self.spec = spec
        self.name = f"snippet:{spec.path}"

    def read(self) -> str:
        return _SNIPPETS[self.spec.path]

register_source("snippet", SnippetSource)

print("Registered sources:")
for kind, how in list_sources().items():
    print(f"  {kind}: {how}")

table = count_source(make_source(SourceSpec(path="greeting", kind="snippet")))
get_writer("text").write(table, order="count")
