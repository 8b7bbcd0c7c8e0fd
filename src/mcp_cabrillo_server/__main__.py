"""Module entrypoint.

Allows:
    python -m mcp_cabrillo_server
"""

from __future__ import annotations

from mcp_cabrillo_server.server.cabrillo_server import main

if __name__ == "__main__":
    main()
