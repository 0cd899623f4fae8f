"""Check a collocation dataset file for records the normalizer had to repair."""

import json
import sys
from pathlib import Path

from lexcoll.core.dataset import DEFAULT_PATH
from lexcoll.core.normalize import is_low_quality, normalize_collocation


path = Path(sys.argv[1]) if len(sys.argv) > 1 else DEFAULT_PATH
data = json.loads(path.read_text(encoding="utf-8"))

problems = 0
for entry in data.get("words", []):
    word = entry.get("word", "?")
    sense_ids = {s.get("id") for s in entry.get("senses", [])}
    issues = []

    for profile in entry.get("profiles", []):
        sid = profile.get("sense_id")
        if sid not in sense_ids:
            issues.append(f"profile for undeclared sense {sid!r}")
        collocs = profile.get("top_collocations", [])
        freqs = [normalize_collocation(c).frequency for c in collocs]
        if freqs != sorted(freqs, reverse=True):
            issues.append(f"{sid}: collocations not sorted by freq")
        for raw in collocs:
            c = normalize_collocation(raw)
            if is_low_quality(c):
                issues.append(f"{sid}: empty token")
            elif c.to_dict() != {k: raw.get(k) for k in ("token", "freq", "pmi", "position")}:
                issues.append(f"{sid}: {raw} normalized to {c.to_dict()}")

    for ex in entry.get("examples", []):
        if ex.get("sense_id") not in sense_ids:
            issues.append(f"example for undeclared sense {ex.get('sense_id')!r}")

    if issues:
        problems += len(issues)
        print(f"✗ {word}")
        for issue in issues:
            print(f"  {issue}")
    else:
        print(f"✓ {word}")

print()
print(f"{problems} issue(s) in {path}")
sys.exit(1 if problems else 0)
