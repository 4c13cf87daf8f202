from __future__ import annotations

import re


def extract_resource_context(file_text: str | None, resource_type: str | None) -> str | None:
    """Return the first `resource "<type>" "<name>" { ... }` block in `file_text`.

    This is plain pattern matching, not HCL parsing. The body ends at the
    first closing brace, so a block containing nested sub-blocks (`rule { }`,
    `ingress { }`) is cut short after the first nested block closes. Returns
    None when either argument is empty or no block of that type exists.
    """
    if not file_text or not resource_type:
        return None

    pattern = re.compile(
        r'resource\s+"' + re.escape(resource_type) + r'"\s+"[^"]+"\s*\{[^}]*\}'
    )
    match = pattern.search(file_text)
    return match.group(0) if match else None
