"""API — camada de borda dos proxies.

Responsabilidades:
- Receber o envelope `{category, action, params}` via HTTP
- Validar envelope e parâmetros antes de qualquer chamada externa
- Falar com as APIs dos fornecedores (connectors)
- Sanitizar erros antes da resposta

Subpastas:
- connectors/: clientes HTTP/SQL por fornecedor
- validators/: schemas de parâmetros e classificador SQL
- errors/: sanitizer (regras ordenadas + redação)
- routes/: endpoints HTTP (health, categories, action)

NÃO PODE conter: tabelas de ações nem wiring de settings.
"""
