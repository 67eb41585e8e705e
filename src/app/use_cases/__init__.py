"""Use cases por skill — tabelas de ações (category → action → handler)."""
