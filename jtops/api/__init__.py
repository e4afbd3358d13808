"""jtops API layer - commands return StageResult objects."""
