"""Summary document model and multi-format rendering for AI-generated book summaries."""

__all__: list[str] = []
