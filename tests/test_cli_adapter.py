import json
import logging

import pytest
from click.testing import CliRunner

from shopify_admin.adapters.input.cli.cli_adapter import CLIAdapter
from shopify_admin.application.services.oauth_utility_impl import ShopifyOAuthUtility
from shopify_admin.common.config import Settings
from shopify_admin.common.logging_config import PACKAGE_LOGGER
from shopify_admin.domain.services.request_validation import calculate_hmac
from shopify_admin.domain.value_objects.http_request import ResponseDescriptor

SETTINGS = Settings(client_id='abc', client_secret='secret')


@pytest.fixture(autouse=True)
def reset_package_logger():
  yield
  logger = logging.getLogger(PACKAGE_LOGGER)
  for handler in logger.handlers[:]:
    logger.removeHandler(handler)
  logger.propagate = True
  logger.setLevel(logging.NOTSET)


def _cli(transport):
  return CLIAdapter(ShopifyOAuthUtility(transport=transport), SETTINGS).build()


def test_authorize_url_prints_url(make_transport, token_response):
  result = CliRunner().invoke(_cli(make_transport(token_response)), [
    'authorize-url',
    '--shop', 'my-shop',
    '--redirect-url', 'https://app.example.com/cb',
    '--scope', 'read_orders,write_orders',
  ])

  assert result.exit_code == 0, result.output
  assert result.output.strip() == (
    'https://my-shop/admin/oauth/authorize'
    '?client_id=abc&scope=read_orders,write_orders&redirect_uri=https://app.example.com/cb'
  )


def test_authorize_url_with_state_and_grants(make_transport, token_response):
  result = CliRunner().invoke(_cli(make_transport(token_response)), [
    'authorize-url',
    '--shop', 'my-shop.myshopify.com',
    '--redirect-url', 'https://app.example.com/cb',
    '--scope', 'read_orders',
    '--scope', 'write_orders',
    '--state', 'xyz',
    '--grant', 'per-user',
  ])

  assert result.exit_code == 0, result.output
  assert '&state=xyz&grant_options[]=per-user' in result.output


def test_authorize_url_reports_invalid_shop(make_transport, token_response):
  result = CliRunner().invoke(_cli(make_transport(token_response)), [
    'authorize-url', '--shop', 'bad shop', '--redirect-url', 'https://a.test/cb', '--scope', 'read_orders',
  ])

  assert result.exit_code != 0
  assert 'unsupported characters' in result.output


def test_exchange_code_prints_token(make_transport, token_response):
  transport = make_transport(token_response)

  result = CliRunner().invoke(_cli(transport), [
    '--log-level', 'WARNING', 'exchange-code', '--shop', 'my-shop.myshopify.com', '--code', 'c0de',
  ])

  assert result.exit_code == 0, result.output
  assert json.loads(result.output) == {'access_token': 'tok123', 'scope': ['read_orders', 'write_orders']}
  assert json.loads(transport.requests[0].body) == {'client_id': 'abc', 'client_secret': 'secret', 'code': 'c0de'}


def test_refresh_token_reports_api_errors(make_transport):
  transport = make_transport(ResponseDescriptor.build(401, '{"errors":"[API] Invalid API key or access token"}'))

  result = CliRunner().invoke(_cli(transport), [
    '--log-level', 'WARNING',
    'refresh-token', '--shop', 'my-shop.myshopify.com', '--refresh-token', 'r', '--access-token', 't',
  ])

  assert result.exit_code == 1
  assert 'status 401' in result.output
  assert len(transport.requests) == 1


def test_verify_callback(make_transport, token_response):
  params = [('code', 'abc'), ('shop', 'my-shop.myshopify.com'), ('timestamp', '1337178173')]
  signature = calculate_hmac('secret', params)
  query = '&'.join(f'{key}={value}' for key, value in params) + f'&hmac={signature}'
  cli = _cli(make_transport(token_response))

  valid = CliRunner().invoke(cli, ['verify-callback', '--query', query])
  tampered = CliRunner().invoke(cli, ['verify-callback', '--query', query.replace('code=abc', 'code=xyz')])

  assert valid.exit_code == 0, valid.output
  assert valid.output.strip() == 'valid'
  assert tampered.exit_code == 1
  assert 'does not match' in tampered.output


def test_exchange_code_keeps_logs_off_stdout(make_transport, token_response):
  result = CliRunner().invoke(_cli(make_transport(token_response)), [
    'exchange-code', '--shop', 'my-shop', '--code', 'c',
  ])

  assert result.exit_code == 0, result.output
  assert json.loads(result.stdout) == {'access_token': 'tok123', 'scope': ['read_orders', 'write_orders']}
  assert 'Requesting access token from my-shop' in result.stderr
