"""CLI adapter for running the OAuth flow from a terminal."""
from __future__ import annotations

import json
from contextlib import contextmanager
from typing import Iterator, List, Optional, Tuple
from urllib.parse import parse_qsl

import click

from shopify_admin.common.config import Settings
from shopify_admin.common.logging_config import configure_logging
from shopify_admin.domain.exceptions import ApiRequestError, ShopifyError
from shopify_admin.domain.services.request_validation import generate_state, is_authentic_request
from shopify_admin.domain.value_objects.authorization import AuthorizationResult
from shopify_admin.ports.input.oauth_utility import OAuthUtility


class CLIAdapter:
  def __init__(self, oauth_utility: OAuthUtility, settings: Settings):
    self._oauth_utility = oauth_utility
    self._settings = settings

  def build(self) -> click.Group:
    settings = self._settings

    @click.group()
    @click.option('--log-level', default=settings.log_level, help='Logging level')
    def cli(log_level: str) -> None:
      """Shopify OAuth helper commands."""
      configure_logging(log_level)

    @cli.command('authorize-url')
    @click.option('--shop', required=True, help='Shop host, e.g. my-shop.myshopify.com')
    @click.option('--redirect-url', required=True, help='OAuth callback URL of the app')
    @click.option('--scope', 'scopes', multiple=True, required=True, help='Access scope (repeatable)')
    @click.option('--client-id', default=settings.client_id, help='App client ID (SHOPIFY_CLIENT_ID)')
    @click.option('--state', default=None, help='State nonce echoed back on the callback')
    @click.option('--generate-state', 'generate_state_flag', is_flag=True, help='Generate a random state nonce')
    @click.option('--grant', 'grants', multiple=True, help='Grant option, e.g. per-user (repeatable)')
    def authorize_url(
      shop: str,
      redirect_url: str,
      scopes: Tuple[str, ...],
      client_id: Optional[str],
      state: Optional[str],
      generate_state_flag: bool,
      grants: Tuple[str, ...],
    ) -> None:
      """Print the URL a merchant visits to install the app."""
      if generate_state_flag and not state:
        state = generate_state()
      scope_list = [scope.strip() for value in scopes for scope in value.split(',') if scope.strip()]
      with _cli_errors():
        url = self._oauth_utility.build_authorization_url(
          scope_list, shop, client_id or '', redirect_url, state=state, grants=grants,
        )
      click.echo(url)
      if state:
        click.echo(f'state: {state}', err=True)

    @cli.command('exchange-code')
    @click.option('--shop', required=True, help='Shop host from the callback querystring')
    @click.option('--code', required=True, help='Authorization code from the callback querystring')
    @click.option('--client-id', default=settings.client_id, help='App client ID (SHOPIFY_CLIENT_ID)')
    @click.option('--client-secret', default=settings.client_secret, help='App client secret (SHOPIFY_CLIENT_SECRET)')
    def exchange_code(shop: str, code: str, client_id: Optional[str], client_secret: Optional[str]) -> None:
      """Exchange an authorization code for an access token."""
      with _cli_errors():
        result = self._oauth_utility.authorize(code, shop, client_id or '', client_secret or '')
      click.echo(_present(result))

    @cli.command('refresh-token')
    @click.option('--shop', required=True, help='Shop host')
    @click.option('--refresh-token', required=True, help='The app refresh token')
    @click.option('--access-token', required=True, help='The existing store access token')
    @click.option('--client-id', default=settings.client_id, help='App client ID (SHOPIFY_CLIENT_ID)')
    @click.option('--client-secret', default=settings.client_secret, help='App client secret (SHOPIFY_CLIENT_SECRET)')
    def refresh_token(
      shop: str,
      refresh_token: str,
      access_token: str,
      client_id: Optional[str],
      client_secret: Optional[str],
    ) -> None:
      """Rotate a store access token."""
      with _cli_errors():
        result = self._oauth_utility.refresh_access_token(
          shop, client_id or '', client_secret or '', refresh_token, access_token,
        )
      click.echo(_present(result))

    @cli.command('verify-callback')
    @click.option('--query', required=True, help='Raw callback querystring, including hmac')
    @click.option('--client-secret', default=settings.client_secret, help='App client secret (SHOPIFY_CLIENT_SECRET)')
    def verify_callback(query: str, client_secret: Optional[str]) -> None:
      """Check the HMAC signature of an OAuth callback querystring."""
      if not client_secret:
        raise click.ClickException('--client-secret or SHOPIFY_CLIENT_SECRET is required')
      items = parse_qsl(query.lstrip('?'), keep_blank_values=True)
      if not is_authentic_request(_group_array_params(items), client_secret):
        raise click.ClickException('HMAC signature does not match')
      click.echo('valid')

    return cli

  def run(self) -> None:
    self.build()()


def _present(result: AuthorizationResult) -> str:
  return json.dumps(
    {'access_token': result.access_token, 'scope': list(result.granted_scopes)},
    indent=2,
  )


def _group_array_params(items: List[Tuple[str, str]]) -> list:
  grouped = []
  arrays = {}
  for key, value in items:
    if key.endswith('[]'):
      if key not in arrays:
        arrays[key] = []
        grouped.append((key, arrays[key]))
      arrays[key].append(value)
    else:
      grouped.append((key, value))
  return grouped


@contextmanager
def _cli_errors() -> Iterator[None]:
  """Turn client errors into click errors with a readable message."""
  try:
    yield
  except ApiRequestError as e:
    raise click.ClickException(f'{e} (status {e.status_code})') from e
  except ShopifyError as e:
    raise click.ClickException(str(e)) from e
