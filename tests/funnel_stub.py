"""
Local stand-in for the loan funnel, served through ``page.route``.

Mirrors the live markup the page objects rely on: the same selectors, an
address autocomplete that fills in its suggestions after a delay, and plain
GET forms so every submission can be read back from the request log.
"""

from typing import Dict, List
from urllib.parse import parse_qs, urlparse

STUB_BASE_URL = "https://funnel.test/"

HOME_HTML = """<!doctype html>
<html>
<head><title>Upgrade - Personal Loans, Cards and Rewards Checking | Home</title></head>
<body>
  <form action="/funnel/basic-info" method="get">
    <input name="desiredAmount" type="text">
    <select name="loan-purpose">
      <option value="">Select a purpose</option>
      <option value="DEBT_CONSOLIDATION">Debt Consolidation</option>
      <option value="LARGE_PURCHASE">Large Purchase</option>
      <option value="HOME_IMPROVEMENT">Home Improvement</option>
    </select>
    <button type="submit">Check your rate</button>
  </form>
</body>
</html>
"""

PHONE_FIELD = (
    '<input name="phone" type="tel" data-auto="borrowerPhoneNumber-localSuffix" value="(555)">'
)

BASIC_INFO_HTML = """<!doctype html>
<html>
<head><title>Basic information | Upgrade</title></head>
<body>
  <form action="/funnel/income" method="get">
    <input name="borrowerFirstName">
    <input name="borrowerLastName">
    <input name="street" data-auto="borrowerStreet" autocomplete="off">
    <ul id="suggestions" role="listbox" aria-label="options" hidden></ul>
    <input name="city" data-auto="borrowerCity">
    <input name="state" data-auto="borrowerState">
    <input name="zip" data-auto="borrowerZipCode">
    <input name="dob" data-auto="borrowerDateOfBirth">
    __PHONE__
    <button type="submit" data-auto="continuePersonalInfo">Continue</button>
  </form>
  <script>
    const KNOWN = {
      "123 Main Street": {city: "San Francisco", state: "CA", zip: "94105"},
    };
    const street = document.querySelector('[data-auto="borrowerStreet"]');
    const list = document.getElementById("suggestions");
    const field = (name) => document.querySelector(`[data-auto="${name}"]`);

    street.addEventListener("input", () => {
      const typed = street.value;
      setTimeout(() => {
        list.innerHTML = "";
        const match = KNOWN[typed] || {city: "Springfield", state: "IL", zip: "62701"};
        const option = document.createElement("li");
        option.setAttribute("role", "option");
        option.textContent = `${typed}, ${match.city}, ${match.state}, USA`;
        option.addEventListener("click", () => {
          field("borrowerCity").value = match.city;
          field("borrowerState").value = match.state;
          field("borrowerZipCode").value = match.zip;
          list.hidden = true;
        });
        list.appendChild(option);
        list.hidden = false;
      }, 300);
    });
  </script>
</body>
</html>
"""

INCOME_HTML = """<!doctype html>
<html>
<head><title>Income information | Upgrade</title></head>
<body>
  <form action="/funnel/rates" method="get">
    <input name="income" data-auto="borrowerIncome">
    <input name="additionalIncome" data-auto="borrowerAdditionalIncome">
    <button type="submit" data-auto="continuePersonalInfo">Continue</button>
  </form>
</body>
</html>
"""

RATES_HTML = """<!doctype html>
<html>
<head><title>Your rates | Upgrade</title></head>
<body><h1>Your loan offers</h1></body>
</html>
"""


class FunnelStub:
    """Serves the stub funnel for one page and logs every document request."""

    def __init__(self, base_url: str = STUB_BASE_URL, with_phone: bool = True):
        self.base_url = base_url
        self.requests: List[str] = []
        phone = PHONE_FIELD if with_phone else ""
        self.documents: Dict[str, str] = {
            "/": HOME_HTML,
            "/funnel/basic-info": BASIC_INFO_HTML.replace("__PHONE__", phone),
            "/funnel/income": INCOME_HTML,
            "/funnel/rates": RATES_HTML,
        }

    def install(self, page) -> "FunnelStub":
        page.route(f"{self.base_url}**", self._handle)
        return self

    def _handle(self, route):
        url = route.request.url
        body = self.documents.get(urlparse(url).path)
        if body is None:
            route.fulfill(status=404, content_type="text/plain", body="not found")
            return
        self.requests.append(url)
        route.fulfill(status=200, content_type="text/html", body=body)

    def submitted(self, path: str) -> Dict[str, str]:
        """Query parameters of the last request for ``path``."""
        for url in reversed(self.requests):
            parsed = urlparse(url)
            if parsed.path == path:
                return {k: v[0] for k, v in parse_qs(parsed.query, keep_blank_values=True).items()}
        raise KeyError(f"No request for {path}")
