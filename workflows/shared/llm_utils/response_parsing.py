"""LLM response parsing utilities."""

from typing import Any


def extract_response_content(response: Any) -> str:
    """Extract text content from various LLM response formats.

    List content (text blocks mixed with other block types) is joined in
    order, skipping non-text blocks.
    """
    content = getattr(response, "content", response)
    if isinstance(content, str):
        return content.strip()
    if isinstance(content, list):
        parts = []
        for block in content:
            if isinstance(block, str):
                parts.append(block)
            elif isinstance(block, dict):
                if block.get("type", "text") == "text":
                    parts.append(block.get("text", ""))
            elif hasattr(block, "text"):
                parts.append(block.text)
        return "".join(parts).strip()
    return str(content).strip()
