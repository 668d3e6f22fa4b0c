#!/usr/bin/env python3
"""Create a meeting note from "<date token> <title>".

Date tokens: DD_HH-mm, DD_HH:mm, DD_HH, HH:mm, HH-mm, HH (single digits are fine).
A day that has already passed this month means next month; a time more than 30
minutes ago means tomorrow.

Settings come from the "meetingNote" section of a JSON settings file:
  {"meetingNote": {"meetingNoteTemplatePath": "Templates/Meeting",
                   "meetingNoteBasePath": "Meetings"}}
or from MEETING_NOTE_TEMPLATE_PATH / MEETING_NOTE_BASE_PATH (a .env file works).

Usage:
  PYTHONPATH=. python3 scripts/new_meeting_note.py --root ~/notes 12_14-30 Meeting with team
  PYTHONPATH=. python3 scripts/new_meeting_note.py --store space --settings SETTINGS.json
    (prompts for the date and title; SB_URL / SB_AUTH_TOKEN select the space)
"""

from __future__ import annotations

import argparse
from datetime import datetime
from functools import partial
from pathlib import Path

from dotenv import load_dotenv

from meeting_note.config import load_settings
from meeting_note.errors import ConfigError
from meeting_note.note import MeetingNoteSession
from meeting_note.store import build_store


def main() -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument("text", nargs="*", help="Date token and title. Prompts when omitted.")
    ap.add_argument("--settings", default="SETTINGS.json", help="JSON settings file (default: SETTINGS.json)")
    ap.add_argument("--store", default="local", help="local | space")
    ap.add_argument("--root", default=".", help="Root directory for the local store")
    ap.add_argument("--now", default="", help="Reference time (ISO, e.g. 2024-03-27T10:00) instead of the clock")
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args()

    load_dotenv()

    now = None
    if args.now:
        try:
            now = datetime.fromisoformat(args.now)
        except ValueError:
            raise SystemExit(f"Invalid --now: {args.now}")

    try:
        store = build_store(args.store, root=args.root)
    except (ConfigError, ValueError) as e:
        raise SystemExit(str(e))

    session = MeetingNoteSession(
        load_settings=partial(load_settings, Path(args.settings)),
        store=store,
        verbose=bool(args.verbose),
    )

    raw = " ".join(args.text).strip() or None
    result = session.run(raw, now)
    if result is None:
        raise SystemExit(1)
    print(result.path)


if __name__ == "__main__":
    main()
