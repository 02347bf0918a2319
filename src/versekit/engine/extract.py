"""Pull Verse source out of generated markdown responses."""

from __future__ import annotations

import re
from typing import List

CODE_BLOCK_RE = re.compile(r"```[^\n]*\n(.*?)```", re.DOTALL)


def extract_code_blocks(text: str) -> List[str]:
    """Return the bodies of all fenced code blocks, or ``[text]`` if there are none."""

    blocks = CODE_BLOCK_RE.findall(text)
    if not blocks:
        return [text]
    return blocks


def extract_first_code_block(text: str) -> str:
    return extract_code_blocks(text)[0]
