"""CLI entrypoint for the Shopify admin OAuth helper."""
from __future__ import annotations

import sys
from pathlib import Path

# Add project root to Python path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from shopify_admin.adapters.input.cli.cli_adapter import CLIAdapter
from shopify_admin.common.config import get_settings
from shopify_admin.common.container import create_oauth_utility


def main() -> None:
  settings = get_settings()
  CLIAdapter(create_oauth_utility(settings), settings).run()


if __name__ == '__main__':
  main()
