"""Connectors por fornecedor — adapters de borda para APIs externas.

Estrutura:
- http_base: VendorHttpClient (httpx, sem retries)
- linear/: GraphQL API
- notion/: REST v1
- slack/: Web API
- neon/: Management API + SQL (asyncpg)
- supabase/: PostgREST

Cada fornecedor tem seu próprio connector e tabela de erros, garantindo SRP
e isolamento de falhas.
"""

__all__: list[str] = []
