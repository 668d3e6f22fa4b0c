from __future__ import annotations

import re

REPLY_PREFIX_RE = re.compile(r"^\s*(?:fw|fwd|re)\s*:\s*", re.IGNORECASE)

SEPARATOR = " - "

# Applied in order; each rule sees the previous rule's output.
RULES: list[tuple[re.Pattern[str], str]] = [
    (re.compile(r"[^A-Za-z0-9\s]"), "-"),
    (re.compile(r"^[\s-]+|[\s-]+$"), ""),
    (re.compile(r"\s+"), " "),
    # Any gap holding at least one hyphen becomes exactly one separator,
    # including a bare hyphen inside a compound ("tag-meeting1").
    (re.compile(r"\s*-[\s-]*"), SEPARATOR),
    (re.compile(r"\s+"), " "),
]


def normalize(raw: str) -> str:
    """Turn free text into a filename-safe "word - word" title.

      normalize("Fw: Meeting with team")  # "Meeting with team"
      normalize("--[tag]++meeting1==")    # "tag - meeting1"
      normalize("[tag]    meeting1")      # "tag - meeting1"
      normalize("tag  meeting1")          # "tag meeting1"
      normalize("tag-meeting1")           # "tag - meeting1"

    Only ASCII letters and digits survive. Never raises; idempotent.
    """
    out = REPLY_PREFIX_RE.sub("", raw or "", count=1)
    for patt, repl in RULES:
        out = patt.sub(repl, out)
    return out
