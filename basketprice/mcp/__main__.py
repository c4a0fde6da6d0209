"""CLI entry point: python -m basketprice.mcp [pricing_config]"""

from __future__ import annotations

import sys


def main() -> None:
    from basketprice.config import load_table
    from basketprice.errors import ConfigError
    from basketprice.mcp.server import create_server
    from basketprice.table import PricingTable

    if len(sys.argv) > 1:
        try:
            table = load_table(sys.argv[1])
        except (FileNotFoundError, ConfigError) as e:
            print(f"Error: {e}", file=sys.stderr)
            print("Usage: python -m basketprice.mcp [pricing_config]", file=sys.stderr)
            sys.exit(1)
    else:
        table = PricingTable.default()

    server = create_server(table)
    server.run(transport="stdio")


if __name__ == "__main__":
    main()
