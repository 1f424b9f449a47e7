"""word_freq

Whitespace-token frequency counter.

Public API surface:
- word_freq.cli.main : CLI entrypoint
- word_freq.pipeline.count.count_source / count_text : run the counter
- word_freq.sources : add/extend input sources
- word_freq.writers : add/extend output formats
"""
__all__ = ["__version__"]
__version__ = "0.1.0"
