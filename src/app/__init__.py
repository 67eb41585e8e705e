"""App — orquestração dos proxies.

Subpastas:
- bootstrap/: composition root (settings, logging, wiring por skill)
- dispatch/: tabela de comandos e router (category, action) → handler
- use_cases/: tabelas de ações por skill
- protocols/: contratos dos clientes de fornecedor
- observability/: correlation_id por requisição

Padrão: app orquestra; api adapta; config configura; utils apoia.
"""

__version__ = "1.0.0"
