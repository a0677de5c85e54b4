import pytest

from shopify_admin.domain.exceptions import InvalidDomainError
from shopify_admin.domain.services.shop_domain_resolver import ShopDomainResolver

resolver = ShopDomainResolver()


@pytest.mark.parametrize('identifier', [
  'my-shop.myshopify.com',
  'https://my-shop.myshopify.com',
  'https://my-shop.myshopify.com/',
  'http://My-Shop.myshopify.com/admin/orders?page=2#top',
  'https://my-shop.myshopify.com:443/admin',
  '  my-shop.myshopify.com  ',
  '//my-shop.myshopify.com',
])
def test_bare_hosts_and_urls_resolve_to_the_same_base_uri(identifier):
  domain = resolver.resolve(identifier)

  assert domain.host == 'my-shop.myshopify.com'
  assert domain.base_uri == 'https://my-shop.myshopify.com'


def test_bare_shop_name_is_kept_as_host():
  assert resolver.resolve('my-shop').base_uri == 'https://my-shop'


def test_resolve_is_idempotent():
  first = resolver.resolve('HTTPS://Example-Store.myshopify.com/admin')

  assert resolver.resolve(first.host) == first
  assert resolver.resolve(first.base_uri) == first


@pytest.mark.parametrize('identifier', [
  None,
  '',
  '   ',
  'my shop.myshopify.com',
  'shop<script>.com',
  'ftp://my-shop.myshopify.com',
  'https://',
  '-bad.myshopify.com',
  'bad-.myshopify.com',
  'under_score.myshopify.com',
  'double..dot.com',
  'https://my-shop.myshopify.com:notaport',
  'a' * 64 + '.com',
])
def test_invalid_identifiers_raise(identifier):
  with pytest.raises(InvalidDomainError):
    resolver.resolve(identifier)


def test_url_for_joins_query_without_encoding():
  domain = resolver.resolve('my-shop.myshopify.com')

  url = domain.url_for('/admin/oauth/authorize', [('a', '1'), ('redirect_uri', 'https://x.test/cb')])

  assert url == 'https://my-shop.myshopify.com/admin/oauth/authorize?a=1&redirect_uri=https://x.test/cb'


def test_url_for_escapes_only_characters_illegal_in_urls():
  domain = resolver.resolve('my-shop.myshopify.com')

  url = domain.url_for('admin/oauth/authorize', [('state', 'a b\tc'), ('redirect_uri', 'https://x.test/ü')])

  assert url == 'https://my-shop.myshopify.com/admin/oauth/authorize?state=a%20b%09c&redirect_uri=https://x.test/%C3%BC'
