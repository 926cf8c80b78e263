"""Shell building blocks: a quote-aware tokenizer, pipe checks, a string toolkit and a shell tester."""

__version__ = "0.1.0"