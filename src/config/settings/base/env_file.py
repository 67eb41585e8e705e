"""Leitura do arquivo chave-valor de cada skill.

Cada proxy lê `~/.config/<skill>-plugin/.env` (fora da árvore de código).
Variáveis de ambiente do processo têm precedência sobre o arquivo.
`SKILL_CONFIG_DIR` substitui `~/.config` (útil em testes e containers).
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

from dotenv import dotenv_values


def config_dir_for(skill: str, environ: Mapping[str, str] | None = None) -> Path:
    """Diretório de configuração do skill (ex: ~/.config/linear-plugin)."""
    env = os.environ if environ is None else environ
    base = env.get("SKILL_CONFIG_DIR") or str(Path.home() / ".config")
    return Path(base) / f"{skill}-plugin"


def env_file_for(skill: str, environ: Mapping[str, str] | None = None) -> Path:
    """Caminho do arquivo .env do skill."""
    return config_dir_for(skill, environ) / ".env"


def load_skill_env(skill: str, environ: Mapping[str, str] | None = None) -> dict[str, str]:
    """Carrega valores do .env do skill sobrepostos pelo ambiente do processo.

    Arquivo ausente não é erro aqui: a validação das settings reporta as
    chaves obrigatórias que faltam, com instruções de criação do arquivo.

    Args:
        skill: Nome do skill (linear, notion, slack, neon, supabase).
        environ: Ambiente alternativo (default: os.environ).

    Returns:
        Dict chave→valor (sem entradas vazias do arquivo).
    """
    env = os.environ if environ is None else environ
    path = env_file_for(skill, env)

    values: dict[str, str] = {}
    if path.is_file():
        for key, value in dotenv_values(path).items():
            if value is not None:
                values[key] = value.strip()

    values.update(env)
    return values
