"""GraphQL query for the order list page."""

from typing import Any

from customer_account.domain.model.customer import Customer, Order

CUSTOMER_QUERY = """
query {
  customer {
    id
    emailAddress {
      emailAddress
    }
    firstName
    lastName
    orders(first: 10) {
      edges {
        node {
          id
          name
        }
      }
    }
  }
}
"""


def parse_customer(data: dict[str, Any]) -> Customer:
    """Map the query's customer object onto the domain model.

    Args:
        data: The "customer" object from the GraphQL response

    Returns:
        Customer domain model
    """
    email = data.get("emailAddress") or {}
    edges = (data.get("orders") or {}).get("edges") or []
    return Customer(
        id=data["id"],
        email_address=email.get("emailAddress"),
        first_name=data.get("firstName"),
        last_name=data.get("lastName"),
        orders=tuple(
            Order(id=edge["node"]["id"], name=edge["node"]["name"]) for edge in edges
        ),
    )
