"""Conversão de blocos e propriedades Notion para texto simples."""

from __future__ import annotations

from typing import Any

Block = dict[str, Any]

_PREFIXES = {
    "paragraph": "",
    "heading_1": "# ",
    "heading_2": "## ",
    "heading_3": "### ",
    "bulleted_list_item": "• ",
    "numbered_list_item": "1. ",
    "toggle": "▸ ",
    "quote": "> ",
}

_MEDIA_TYPES = frozenset({"image", "video", "file", "pdf"})


def rich_text_to_string(rich_text: list[dict[str, Any]] | None) -> str:
    if not rich_text:
        return ""
    return "".join(str(item.get("plain_text", "")) for item in rich_text)


def extract_title(properties: dict[str, Any] | None) -> str:
    """Título de uma página: a propriedade do tipo `title`."""
    for value in (properties or {}).values():
        if isinstance(value, dict) and value.get("type") == "title":
            return rich_text_to_string(value.get("title"))
    return "Untitled"


def database_title(title: list[dict[str, Any]] | None) -> str:
    return rich_text_to_string(title) or "Untitled"


def block_to_text(block: Block) -> str:
    """Renderiza um bloco em uma linha de texto (markdown leve)."""
    block_type = str(block.get("type", ""))
    content = block.get(block_type)
    if not isinstance(content, dict):
        return "---" if block_type == "divider" else ""

    text = rich_text_to_string(content.get("rich_text"))

    if block_type in _PREFIXES:
        return f"{_PREFIXES[block_type]}{text}"
    if block_type == "to_do":
        checked = "x" if content.get("checked") else " "
        return f"[{checked}] {text}"
    if block_type == "code":
        language = content.get("language") or ""
        return f"```{language}\n{text}\n```"
    if block_type == "callout":
        icon = content.get("icon") or {}
        emoji = icon.get("emoji") if isinstance(icon, dict) else None
        return f"{emoji or '💡'} {text}"
    if block_type == "divider":
        return "---"
    if block_type in _MEDIA_TYPES:
        source = content.get("external") or content.get("file") or {}
        url = source.get("url", "") if isinstance(source, dict) else ""
        return f"[{block_type}: {url}]"
    if block_type in ("bookmark", "link_preview"):
        url = content.get("url")
        return f"[{url}]" if url else ""
    if block_type == "table":
        return "[table]"
    if block_type == "child_page":
        return f"📄 {content.get('title') or 'Page'}"
    if block_type == "child_database":
        return f"🗃️ {content.get('title') or 'Database'}"
    return text or f"[{block_type}]"


def paragraph_blocks(content: str) -> list[dict[str, Any]]:
    """Divide texto em parágrafos (separados por linha em branco) como blocos."""
    return [
        {
            "object": "block",
            "type": "paragraph",
            "paragraph": {"rich_text": [{"type": "text", "text": {"content": paragraph}}]},
        }
        for paragraph in content.split("\n\n")
        if paragraph.strip()
    ]
