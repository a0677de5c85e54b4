"""Service for the order risk resource."""
from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

from shopify_admin.application.services.shopify_service import ShopifyService


class OrderRiskService(ShopifyService):
  """Fraud risk assessments attached to an order."""

  def list(self, order_id: int) -> List[Dict[str, Any]]:
    """All risks recorded for an order.

    Only the class body sees this name in place of the builtin ``list``.
    """
    return self.execute_request('GET', f'orders/{order_id}/risks.json', root_element='risks') or []

  def get(self, order_id: int, risk_id: int) -> Optional[Dict[str, Any]]:
    return self.execute_request('GET', f'orders/{order_id}/risks/{risk_id}.json', root_element='risk')

  def create(self, order_id: int, risk: Mapping[str, Any]) -> Optional[Dict[str, Any]]:
    return self.execute_request(
      'POST', f'orders/{order_id}/risks.json', payload={'risk': dict(risk)}, root_element='risk'
    )

  def update(self, order_id: int, risk_id: int, risk: Mapping[str, Any]) -> Optional[Dict[str, Any]]:
    return self.execute_request(
      'PUT',
      f'orders/{order_id}/risks/{risk_id}.json',
      payload={'risk': dict(risk, id=risk_id)},
      root_element='risk',
    )

  def delete(self, order_id: int, risk_id: int) -> None:
    self.execute_request('DELETE', f'orders/{order_id}/risks/{risk_id}.json')
