"""Bridge between LLM content requests and Drupal node payloads."""

__version__ = "0.1.0"
