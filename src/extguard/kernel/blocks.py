"""Block extraction: split one generated text blob into named artifacts.

A section has the shape::

    ```<name>
    <content>
    ```

where ``<name>`` contains no whitespace. Sections that do not match this shape
(including an unterminated trailing section while text is still streaming)
are ignored.
"""

import re
from typing import List

from extguard.contracts import Artifact


FENCE = "```"

_BLOCK_RE = re.compile(r"```(\S+)\r?\n(.*?)```", re.DOTALL)


def extract_blocks(raw: str) -> List[Artifact]:
    """Return the fenced sections of ``raw`` as artifacts, in text order.

    Content is stripped of leading/trailing whitespace. No sections yields an
    empty list (a valid pre-generation state, not an error).
    """
    if not raw:
        return []
    return [
        Artifact(name=match.group(1), content=match.group(2).strip())
        for match in _BLOCK_RE.finditer(raw)
    ]
