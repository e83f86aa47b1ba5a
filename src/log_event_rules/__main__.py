"""Module entrypoint.

Allows:
    python -m log_event_rules
"""

from __future__ import annotations

from log_event_rules.server.rule_server import main

if __name__ == "__main__":
    main()
