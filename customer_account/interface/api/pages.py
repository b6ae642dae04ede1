"""HTML pages for the customer account flow.

Pages are unstyled; every interpolated value is escaped.
"""

from html import escape

from fastapi.responses import HTMLResponse

from customer_account.domain.model.customer import Customer


def html_page(title: str, body: str, status_code: int = 200) -> HTMLResponse:
    """Wrap pre-escaped body markup in a minimal HTML document."""
    content = (
        "<!doctype html><html lang='en'>"
        "<head><meta charset='utf-8'>"
        f"<title>{escape(title)}</title></head>"
        f"<body><h1>{escape(title)}</h1>{body}</body></html>"
    )
    return HTMLResponse(content, status_code=status_code)


def link(href: str, label: str) -> str:
    return f"<p><a href='{escape(href, quote=True)}'>{escape(label)}</a></p>"


def error_page(title: str, message: str, retry_href: str, retry_label: str) -> HTMLResponse:
    """Render a failure with a link to restart the flow.

    Failures are rendered with status 200 so the browser shows our page.
    """
    body = f"<p class='error'>{escape(message)}</p>" + link(retry_href, retry_label)
    return html_page(title, body)


def order_list_page(
    customer: Customer | None, api_error: str | None, logout_href: str
) -> HTMLResponse:
    """Render the customer's details and recent orders.

    A Customer Account API failure is shown in its own section of the page.
    """
    if customer is None:
        body = (
            "<section class='api-error'><h2>Customer Account API Error</h2>"
            f"<p>{escape(api_error or 'No customer data returned')}</p></section>"
        )
        return html_page("Customer Orders", body + link(logout_href, "Sign out"))

    details = (
        "<dl>"
        f"<dt>Email</dt><dd>{escape(customer.email_address or '')}</dd>"
        f"<dt>First name</dt><dd>{escape(customer.first_name or '')}</dd>"
        f"<dt>Last name</dt><dd>{escape(customer.last_name or '')}</dd>"
        "</dl>"
    )
    if customer.orders:
        items = "".join(f"<li>{escape(order.name)}</li>" for order in customer.orders)
        orders = f"<h2>Orders</h2><ul class='orders'>{items}</ul>"
    else:
        orders = "<h2>Orders</h2><p>No orders yet.</p>"

    return html_page("Customer Orders", details + orders + link(logout_href, "Sign out"))
